"""RPC logging – the structured log record schema.

Every type here is immutable.  :meth:`LogRecord.to_dict` produces the
structured-JSON shape consumed by log backends; its snake_case field names and
enum wire names are a compatibility surface for downstream log analysis and
must not change silently.
"""
from __future__ import annotations

import base64
import dataclasses
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

from rpc_observability.kernel.errors import InvalidArgumentError

_NANOS_PER_SECOND = 1_000_000_000
_MAX_UINT64 = 2**64 - 1


class EventType(str, Enum):
    """Point in the call lifecycle a record describes."""

    REQUEST_HEADER = "GRPC_CALL_REQUEST_HEADER"
    RESPONSE_HEADER = "GRPC_CALL_RESPONSE_HEADER"
    REQUEST_MESSAGE = "GRPC_CALL_REQUEST_MESSAGE"
    RESPONSE_MESSAGE = "GRPC_CALL_RESPONSE_MESSAGE"
    TRAILER = "GRPC_CALL_TRAILER"
    HALF_CLOSE = "GRPC_CALL_HALF_CLOSE"
    CANCEL = "GRPC_CALL_CANCEL"


class EventLogger(str, Enum):
    """Side of the call that produced a record."""

    CLIENT = "LOGGER_CLIENT"
    SERVER = "LOGGER_SERVER"


class LogLevel(str, Enum):
    UNKNOWN = "LOG_LEVEL_UNKNOWN"
    TRACE = "LOG_LEVEL_TRACE"
    DEBUG = "LOG_LEVEL_DEBUG"
    INFO = "LOG_LEVEL_INFO"
    WARN = "LOG_LEVEL_WARN"
    ERROR = "LOG_LEVEL_ERROR"
    CRITICAL = "LOG_LEVEL_CRITICAL"


class AddressType(str, Enum):
    UNKNOWN = "TYPE_UNKNOWN"
    IPV4 = "TYPE_IPV4"
    IPV6 = "TYPE_IPV6"
    UNIX = "TYPE_UNIX"


def _fraction(nanos: int) -> str:
    """Render nanos with 0, 3, 6 or 9 digits, whichever is exact."""
    if nanos == 0:
        return ""
    if nanos % 1_000_000 == 0:
        return f".{nanos // 1_000_000:03d}"
    if nanos % 1_000 == 0:
        return f".{nanos // 1_000:06d}"
    return f".{nanos:09d}"


@dataclasses.dataclass(frozen=True, slots=True)
class Timestamp:
    """Wall-clock instant with nanosecond precision."""

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < _NANOS_PER_SECOND:
            raise InvalidArgumentError(f"nanos out of range: {self.nanos}", argument="nanos")

    @classmethod
    def from_nanos(cls, total_nanos: int) -> "Timestamp":
        seconds, nanos = divmod(total_nanos, _NANOS_PER_SECOND)
        return cls(seconds, nanos)

    def to_nanos(self) -> int:
        return self.seconds * _NANOS_PER_SECOND + self.nanos

    def to_datetime(self) -> datetime:
        """Convert to an aware ``datetime`` (sub-microsecond digits are dropped)."""
        return datetime.fromtimestamp(self.seconds, UTC) + timedelta(microseconds=self.nanos // 1_000)

    def to_rfc3339(self) -> str:
        base = datetime.fromtimestamp(self.seconds, UTC).strftime("%Y-%m-%dT%H:%M:%S")
        return f"{base}{_fraction(self.nanos)}Z"


@dataclasses.dataclass(frozen=True, slots=True)
class Duration:
    """Signed span of time; ``seconds`` and ``nanos`` always share a sign."""

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not -_NANOS_PER_SECOND < self.nanos < _NANOS_PER_SECOND:
            raise InvalidArgumentError(f"nanos out of range: {self.nanos}", argument="nanos")
        if (self.seconds > 0 and self.nanos < 0) or (self.seconds < 0 and self.nanos > 0):
            raise InvalidArgumentError("seconds and nanos must share a sign", argument="nanos")

    @classmethod
    def from_nanos(cls, total_nanos: int) -> "Duration":
        sign = -1 if total_nanos < 0 else 1
        seconds, nanos = divmod(abs(total_nanos), _NANOS_PER_SECOND)
        return cls(sign * seconds, sign * nanos)

    @classmethod
    def from_millis(cls, millis: int) -> "Duration":
        return cls.from_nanos(millis * 1_000_000)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        return cls.from_nanos((delta // timedelta(microseconds=1)) * 1_000)

    def to_nanos(self) -> int:
        return self.seconds * _NANOS_PER_SECOND + self.nanos

    def to_timedelta(self) -> timedelta:
        return timedelta(microseconds=self.to_nanos() // 1_000)

    def to_json(self) -> str:
        sign = "-" if self.to_nanos() < 0 else ""
        return f"{sign}{abs(self.seconds)}{_fraction(abs(self.nanos))}s"


@dataclasses.dataclass(frozen=True, slots=True)
class Address:
    """Structured transport peer address.  ``ip_port`` is set for IPv4/IPv6 only."""

    type: AddressType = AddressType.UNKNOWN
    address: str = ""
    ip_port: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type.value, "address": self.address}
        if self.ip_port is not None:
            out["ip_port"] = self.ip_port
        return out


@dataclasses.dataclass(frozen=True, slots=True)
class MetadataEntry:
    key: str
    value: bytes

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "value": base64.b64encode(self.value).decode("ascii")}


@dataclasses.dataclass(frozen=True, slots=True)
class Metadata:
    """Ordered header entries, in the order the caller supplied them."""

    entry: tuple[MetadataEntry, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        if not self.entry:
            return {}
        return {"entry": [e.to_dict() for e in self.entry]}


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """One logged RPC event.

    Optional fields are ``None`` when absent; absence is meaningful (a missing
    ``timeout`` is not a zero timeout, a missing ``status_message`` is not an
    empty one).  ``payload_size`` is the exact number of bytes embedded in
    ``metadata`` or ``message``.
    """

    timestamp: Timestamp
    sequence_id: int
    service_name: str
    method_name: str
    rpc_id: str
    event_type: EventType
    event_logger: EventLogger
    log_level: LogLevel = LogLevel.DEBUG
    authority: str | None = None
    peer_address: Address | None = None
    timeout: Duration | None = None
    metadata: Metadata | None = None
    message: bytes | None = None
    payload_size: int = 0
    payload_truncated: bool = False
    status_code: int | None = None
    status_message: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.sequence_id <= _MAX_UINT64:
            raise InvalidArgumentError(
                f"sequence_id must be an unsigned 64-bit value, got {self.sequence_id}",
                argument="sequence_id",
            )
        if self.payload_size < 0:
            raise InvalidArgumentError("payload_size must not be negative", argument="payload_size")

    def to_dict(self) -> dict[str, Any]:
        """Structured-JSON form with the schema's snake_case field names."""
        out: dict[str, Any] = {
            "timestamp": self.timestamp.to_rfc3339(),
            "rpc_id": self.rpc_id,
            "event_type": self.event_type.value,
            "event_logger": self.event_logger.value,
            "service_name": self.service_name,
            "method_name": self.method_name,
            "log_level": self.log_level.value,
        }
        if self.peer_address is not None:
            out["peer_address"] = self.peer_address.to_dict()
        out["sequence_id"] = self.sequence_id
        if self.authority is not None:
            out["authority"] = self.authority
        if self.timeout is not None:
            out["timeout"] = self.timeout.to_json()
        if self.metadata is not None:
            out["metadata"] = self.metadata.to_dict()
        if self.message is not None:
            out["message"] = base64.b64encode(self.message).decode("ascii")
        out["payload_size"] = self.payload_size
        if self.payload_truncated:
            out["payload_truncated"] = True
        if self.status_code is not None:
            out["status_code"] = self.status_code
        if self.status_message is not None:
            out["status_message"] = self.status_message
        return out


__all__ = [
    "Address",
    "AddressType",
    "Duration",
    "EventLogger",
    "EventType",
    "LogLevel",
    "LogRecord",
    "Metadata",
    "MetadataEntry",
    "Timestamp",
]
