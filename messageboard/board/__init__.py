from .log import MessageLog
from .model import Message
from .pagination import clamp_offset

__all__ = ["Message", "MessageLog", "clamp_offset"]
