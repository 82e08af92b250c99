"""RPC logging – call outcome passed to ``LogHelper.log_trailer``."""
from __future__ import annotations

import dataclasses
from enum import IntEnum


class StatusCode(IntEnum):
    """Canonical RPC status codes."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


@dataclasses.dataclass(frozen=True, slots=True)
class CallStatus:
    """Terminal status of a call: a code plus an optional description."""

    code: StatusCode | int
    description: str | None = None

    def with_description(self, description: str | None) -> "CallStatus":
        return CallStatus(self.code, description)


__all__ = ["CallStatus", "StatusCode"]
