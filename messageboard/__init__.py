"""In-memory message board service."""

__version__ = "0.1.0"
