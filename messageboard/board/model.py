import time
from dataclasses import dataclass, field

NANOS_PER_SEC = 1_000_000_000

@dataclass(frozen=True)
class Message:
    index: int
    text: str
    timestamp_ns: int = field(default_factory=time.time_ns)

    @property
    def secs_since_epoch(self) -> int:
        return self.timestamp_ns // NANOS_PER_SEC

    @property
    def nanos_since_epoch(self) -> int:
        """Sub-second part of the timestamp, in nanoseconds."""
        return self.timestamp_ns % NANOS_PER_SEC
