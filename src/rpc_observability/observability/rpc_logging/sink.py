"""RPC logging – Sink port."""
from __future__ import annotations

import abc

from rpc_observability.observability.rpc_logging.record import LogRecord


class Sink(abc.ABC):
    """Port: deliver completed log records to durable or remote storage.

    Implementations must never let a backend failure reach the caller:
    ``write`` and ``close`` catch, log and swallow.  ``close`` is idempotent
    and both methods are safe to call from any thread.  A record handed to
    ``write`` is owned by the sink from then on.
    """

    @abc.abstractmethod
    def write(self, record: LogRecord) -> None: ...

    @abc.abstractmethod
    def close(self) -> None: ...

    def __enter__(self) -> "Sink":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


__all__ = ["Sink"]
