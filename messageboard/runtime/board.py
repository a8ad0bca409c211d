from typing import List
from ..board.log import MessageLog
from ..board.model import Message
from ..utils.logging import get_logger
from .guard import ReadWriteLock

logger = get_logger(__name__)

class SharedBoard:
    """The process-wide message log, reachable only through its lock."""

    def __init__(self):
        self._log = MessageLog()
        self._lock = ReadWriteLock()

    async def append(self, text: str) -> Message:
        """Append a message under exclusive access."""
        async with self._lock.write():
            msg = self._log.append(text)
            length = len(self._log)
        logger.debug("message_appended", index=msg.index, length=length)
        return msg

    async def read_from(self, offset: int = 0) -> List[Message]:
        """Get messages from offset onward (consistent snapshot)."""
        async with self._lock.read():
            # read_from copies; nothing returned here refers back into the log
            msgs = self._log.read_from(offset)
            length = len(self._log)
        logger.debug("messages_read", offset=offset, count=len(msgs), length=length)
        return msgs

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._log)
