from .board import SharedBoard
from .guard import ReadWriteLock

__all__ = ["ReadWriteLock", "SharedBoard"]
