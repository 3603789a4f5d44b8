import time
from dataclasses import dataclass


@dataclass(frozen=True)
class ColdStartResult:
    timestamp_millis: int

    def to_body(self):
        return {"date": self.timestamp_millis}


def now():
    """Read the wall clock in epoch milliseconds, nothing else."""
    return ColdStartResult(timestamp_millis=time.time_ns() // 1_000_000)
