"""
Track Result Value Object

Architectural Intent:
- Tri-state outcome returned by every tracker operation
- External-process problems are reported here instead of being raised
- Status codes (-1, 0, 1) are kept for scripts that branch on integers
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TrackStatus(Enum):
    FAILURE = -1
    NOT_FOUND = 0
    FOUND = 1


class FailureCause(Enum):
    INVOCATION = "invocation"  # tool could not be started
    REMOTE = "remote"  # tool printed an error line


@dataclass(frozen=True)
class TrackResult:
    status: TrackStatus
    message: str = ""
    cause: Optional[FailureCause] = None

    @classmethod
    def failure(cls, message: str, cause: FailureCause) -> "TrackResult":
        return cls(TrackStatus.FAILURE, message, cause)

    @classmethod
    def not_found(cls, message: str) -> "TrackResult":
        return cls(TrackStatus.NOT_FOUND, message)

    @classmethod
    def found(cls, message: str) -> "TrackResult":
        return cls(TrackStatus.FOUND, message)

    @property
    def is_failure(self) -> bool:
        return self.status is TrackStatus.FAILURE

    @property
    def is_found(self) -> bool:
        return self.status is TrackStatus.FOUND

    @property
    def code(self) -> int:
        return self.status.value

    def as_tuple(self) -> tuple[int, str]:
        return self.code, self.message

    def __str__(self) -> str:
        return f"{self.status.name}: {self.message}"
