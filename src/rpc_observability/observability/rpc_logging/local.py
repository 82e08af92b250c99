"""RPC logging – StructlogSink, a local sink rendering records through structlog."""
from __future__ import annotations

import threading
from typing import Any

from rpc_observability.observability.logging import get_logger
from rpc_observability.observability.rpc_logging.record import LogLevel, LogRecord
from rpc_observability.observability.rpc_logging.sink import Sink


def _method_for(level: LogLevel) -> str:
    match level:
        case LogLevel.TRACE | LogLevel.DEBUG:
            return "debug"
        case LogLevel.INFO:
            return "info"
        case LogLevel.WARN:
            return "warning"
        case LogLevel.ERROR:
            return "error"
        case LogLevel.CRITICAL:
            return "critical"
        case _:
            return "info"


class StructlogSink(Sink):
    """Emit each record as one structured event on a structlog logger.

    Useful for local development or when a log shipper already tails the
    process output.  The structured record is bound under the ``record`` key.

    Parameters
    ----------
    logger:
        Logger to emit on.  Defaults to ``get_logger("rpc_observability.rpc")``.
    event:
        Event name used for every emitted entry.
    """

    def __init__(self, logger: Any = None, event: str = "rpc.event") -> None:
        self._log = logger if logger is not None else get_logger("rpc_observability.rpc")
        self._event = event
        self._lock = threading.Lock()
        self._closed = False
        self._diag = get_logger(__name__)

    def write(self, record: LogRecord) -> None:
        with self._lock:
            if self._closed:
                self._diag.warning("sink.write_after_close", sink="structlog")
                return
        try:
            getattr(self._log, _method_for(record.log_level))(self._event, record=record.to_dict())
        except Exception:  # noqa: BLE001
            self._diag.exception("sink.write_failed", sink="structlog", rpc_id=record.rpc_id)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                self._diag.warning("sink.close_after_close", sink="structlog")
                return
            self._closed = True


__all__ = ["StructlogSink"]
