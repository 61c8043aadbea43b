from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Status reported for any target that never produced an HTTP response.
SENTINEL_STATUS = 404


class FailureKind(str, Enum):
    TIMEOUT = "timeout"
    CONNECTION = "connection"
    INVALID_URL = "invalid_url"
    PROTOCOL = "protocol"
    WORKER = "worker"


@dataclass(frozen=True)
class PingResult:
    url: str
    status_code: int
    duration_ns: int
    failure: FailureKind | None = None

    @property
    def reachable(self) -> bool:
        return self.failure is None

    @property
    def duration_ms(self) -> float:
        return self.duration_ns / 1_000_000
