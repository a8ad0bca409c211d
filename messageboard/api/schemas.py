from pydantic import BaseModel
from ..board.model import Message

class SystemTime(BaseModel):
    """Wall-clock time split into whole seconds and the nanosecond remainder."""
    secs_since_epoch: int
    nanos_since_epoch: int

class MessageOut(BaseModel):
    """Message response schema."""
    timestamp: SystemTime
    message: str

    @classmethod
    def from_message(cls, msg: Message) -> "MessageOut":
        return cls(
            timestamp=SystemTime(secs_since_epoch=msg.secs_since_epoch,
                                 nanos_since_epoch=msg.nanos_since_epoch),
            message=msg.text,
        )
