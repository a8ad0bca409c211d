from typing import List
from .model import Message
from .pagination import clamp_offset

class MessageLog:
    """Append-only message storage. Not synchronized; see runtime.board.SharedBoard."""

    def __init__(self):
        self._log: List[Message] = []

    def __len__(self) -> int:
        return len(self._log)

    def append(self, text: str) -> Message:
        """Append a message at the next unused index and return it."""
        msg = Message(index=len(self._log), text=text)
        self._log.append(msg)
        return msg

    def read_from(self, offset: int = 0) -> List[Message]:
        """Return a copy of every message from offset onward, in log order."""
        start = clamp_offset(offset, len(self._log))
        return self._log[start:]
