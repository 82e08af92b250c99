"""GCP adapter – GcpLogSink, a Sink backed by Google Cloud Logging."""
from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any

from rpc_observability.kernel.errors import SinkError
from rpc_observability.observability.rpc_logging import LogLevel, LogRecord, RpcLoggingSettings, Sink
from rpc_observability.observability.rpc_logging.settings import DEFAULT_LOG_NAME, DEFAULT_SERVICE_TO_EXCLUDE

logger = logging.getLogger(__name__)

GLOBAL_RESOURCE_TYPE = "global"


def _require_gcp_logging() -> Any:
    try:
        from google.cloud import logging as gcp_logging
        return gcp_logging
    except ImportError as exc:
        raise ImportError("Install 'rpc-observability[gcp]' to use the Cloud Logging sink") from exc


class CloudSeverity(str, Enum):
    """Cloud Logging severities used by this sink."""

    DEFAULT = "DEFAULT"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def cloud_severity(level: LogLevel) -> CloudSeverity:
    match level:
        case LogLevel.TRACE | LogLevel.DEBUG:
            return CloudSeverity.DEBUG
        case LogLevel.INFO:
            return CloudSeverity.INFO
        case LogLevel.WARN:
            return CloudSeverity.WARNING
        case LogLevel.ERROR:
            return CloudSeverity.ERROR
        case LogLevel.CRITICAL:
            return CloudSeverity.CRITICAL
        case _:
            return CloudSeverity.DEFAULT


class GcpLogSink(Sink):
    """Write RPC log records to Cloud Logging as structured JSON entries.

    Records for the Cloud Logging service itself are dropped so that logging
    the backend's own traffic cannot feed back into it.  Submission and the
    open/closed state share one lock: at most one ``log_struct`` call is in
    flight per sink and nothing reaches the client after :meth:`close`.

    Parameters
    ----------
    project_id:
        Destination project.  ``None`` or empty defers to the client's
        ambient project resolution.
    client:
        Pre-built ``google.cloud.logging.Client``; takes precedence over
        *project_id*.
    log_name:
        Log stream every entry is written to.
    service_to_exclude:
        Service name whose records are never forwarded.
    """

    def __init__(
        self,
        project_id: str | None = None,
        *,
        client: Any = None,
        log_name: str = DEFAULT_LOG_NAME,
        service_to_exclude: str = DEFAULT_SERVICE_TO_EXCLUDE,
    ) -> None:
        self._gcp = _require_gcp_logging()
        self._client = client if client is not None else self._create_client(project_id)
        self._logger = self._client.logger(log_name)
        self._resource = self._gcp.Resource(type=GLOBAL_RESOURCE_TYPE, labels={})
        self._service_to_exclude = service_to_exclude
        self._lock = threading.Lock()
        self._closed = False

    @classmethod
    def from_settings(cls, settings: RpcLoggingSettings, client: Any = None) -> "GcpLogSink":
        return cls(
            settings.project_id,
            client=client,
            log_name=settings.log_name,
            service_to_exclude=settings.service_to_exclude,
        )

    def _create_client(self, project_id: str | None) -> Any:
        try:
            if project_id:
                return self._gcp.Client(project=project_id)
            return self._gcp.Client()
        except Exception as exc:
            raise SinkError("gcp", f"Could not create Cloud Logging client: {exc}", cause=exc) from exc

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def write(self, record: LogRecord) -> None:
        try:
            with self._lock:
                if self._closed:
                    logger.warning("Attempt to write after GcpLogSink is closed")
                    return
                if record.service_name == self._service_to_exclude:
                    return
                payload = record.to_dict()
                severity = cloud_severity(record.log_level)
                logger.debug("Writing gRPC event %s to Cloud Logging", record.event_type.name)
                self._logger.log_struct(payload, severity=severity.value, resource=self._resource)
        except Exception:  # noqa: BLE001
            logger.exception("Caught exception while writing to Cloud Logging")

    def close(self) -> None:
        with self._lock:
            if self._closed:
                logger.warning("Attempt to close after GcpLogSink is closed")
                return
            self._closed = True
            try:
                self._client.close()
            except Exception:  # noqa: BLE001
                logger.exception("Caught exception while closing Cloud Logging client")


__all__ = ["CloudSeverity", "GcpLogSink", "cloud_severity"]
