"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol

_NANOS_PER_SECOND = 1_000_000_000


class Clock(Protocol):
    """Port: wall-clock time source for deterministic testing."""

    def now(self) -> datetime: ...
    def time_ns(self) -> int: ...


class SystemClock:
    """Production clock backed by :func:`time.time_ns`."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def time_ns(self) -> int:
        return time.time_ns()


class FrozenClock:
    """Test clock pinned to a fixed instant with nanosecond precision."""

    def __init__(self, fixed: datetime | int) -> None:
        if isinstance(fixed, datetime):
            # datetime carries microseconds only
            fixed = int(fixed.timestamp()) * _NANOS_PER_SECOND + fixed.microsecond * 1_000
        self._fixed_ns = fixed

    def now(self) -> datetime:
        seconds, nanos = divmod(self._fixed_ns, _NANOS_PER_SECOND)
        return datetime.fromtimestamp(seconds, UTC) + timedelta(microseconds=nanos // 1_000)

    def time_ns(self) -> int:
        return self._fixed_ns

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        delta = timedelta(**kwargs)
        self._fixed_ns += (delta.days * 86_400 + delta.seconds) * _NANOS_PER_SECOND + delta.microseconds * 1_000


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
