"""RPC logging – LogHelper, the event-to-record assembler.

Interceptors call one ``log_*`` method per observed call event.  Each method
validates its arguments, builds a fresh immutable :class:`LogRecord` and hands
it synchronously to the configured :class:`Sink`.  The helper keeps no state
between calls, so a single instance is shared by every in-flight call.

Peer addresses are directional on headers:

* request header: only the server side knows the remote end of the accepted
  connection, so a client-side record must not carry one;
* response header: only the client side may attach it.

Violations raise :class:`InvalidArgumentError`; they indicate mis-wiring in the
interceptor layer.  Sink failures never surface here.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from rpc_observability.kernel.errors import InvalidArgumentError
from rpc_observability.kernel.time import Clock, SystemClock
from rpc_observability.observability.rpc_logging.address import address_to_structured
from rpc_observability.observability.rpc_logging.payload import (
    MetadataLike,
    message_to_structured,
    metadata_to_structured,
)
from rpc_observability.observability.rpc_logging.record import (
    Address,
    Duration,
    EventLogger,
    EventType,
    LogLevel,
    LogRecord,
    Timestamp,
)
from rpc_observability.observability.rpc_logging.settings import RpcLoggingSettings
from rpc_observability.observability.rpc_logging.sink import Sink
from rpc_observability.observability.rpc_logging.status import CallStatus

TRANSPORT_ATTR_REMOTE_ADDR = "remote-addr"
"""Well-known call attribute holding the transport peer address."""

_MESSAGE_EVENTS = frozenset({EventType.REQUEST_MESSAGE, EventType.RESPONSE_MESSAGE})


def _to_duration(timeout: Duration | timedelta | None) -> Duration | None:
    if timeout is None or isinstance(timeout, Duration):
        return timeout
    return Duration.from_timedelta(timeout)


class LogHelper:
    """Build structured log records for RPC events and write them to a sink.

    Parameters
    ----------
    sink:
        Destination for every record built by this helper.
    clock:
        Wall-clock time source; defaults to :class:`SystemClock`.
    max_metadata_bytes / max_message_bytes:
        Optional payload ceilings.  ``None`` (default) embeds payloads in full.
    """

    def __init__(
        self,
        sink: Sink,
        clock: Clock | None = None,
        *,
        max_metadata_bytes: int | None = None,
        max_message_bytes: int | None = None,
    ) -> None:
        self._sink = sink
        self._clock: Clock = clock or SystemClock()
        self._max_metadata_bytes = max_metadata_bytes
        self._max_message_bytes = max_message_bytes

    @classmethod
    def from_settings(
        cls,
        sink: Sink,
        settings: RpcLoggingSettings,
        clock: Clock | None = None,
    ) -> "LogHelper":
        return cls(
            sink,
            clock,
            max_metadata_bytes=settings.max_metadata_bytes,
            max_message_bytes=settings.max_message_bytes,
        )

    # ------------------------------------------------------------------
    # Event operations
    # ------------------------------------------------------------------

    def log_request_header(
        self,
        sequence_id: int,
        service_name: str,
        method_name: str,
        authority: str | None,
        timeout: Duration | timedelta | None,
        metadata: MetadataLike | None,
        event_logger: EventLogger,
        rpc_id: str,
        peer_address: Any = None,
    ) -> None:
        """Log the request headers of a call (sent by client, received by server)."""
        if event_logger == EventLogger.CLIENT and peer_address is not None:
            raise InvalidArgumentError(
                "peer_address can only be specified by server", argument="peer_address"
            )
        payload = metadata_to_structured(metadata, self._max_metadata_bytes)
        self._emit(
            sequence_id,
            service_name,
            method_name,
            rpc_id,
            EventType.REQUEST_HEADER,
            event_logger,
            authority=authority,
            timeout=_to_duration(timeout),
            metadata=payload.payload,
            payload_size=payload.size,
            payload_truncated=payload.truncated,
            peer_address=self._peer(peer_address),
        )

    def log_response_header(
        self,
        sequence_id: int,
        service_name: str,
        method_name: str,
        metadata: MetadataLike | None,
        event_logger: EventLogger,
        rpc_id: str,
        peer_address: Any = None,
    ) -> None:
        """Log the response headers of a call (sent by server, received by client)."""
        if event_logger == EventLogger.SERVER and peer_address is not None:
            raise InvalidArgumentError(
                "peer_address can only be specified for client", argument="peer_address"
            )
        payload = metadata_to_structured(metadata, self._max_metadata_bytes)
        self._emit(
            sequence_id,
            service_name,
            method_name,
            rpc_id,
            EventType.RESPONSE_HEADER,
            event_logger,
            metadata=payload.payload,
            payload_size=payload.size,
            payload_truncated=payload.truncated,
            peer_address=self._peer(peer_address),
        )

    def log_trailer(
        self,
        sequence_id: int,
        service_name: str,
        method_name: str,
        status: CallStatus,
        metadata: MetadataLike | None,
        event_logger: EventLogger,
        rpc_id: str,
        peer_address: Any = None,
    ) -> None:
        """Log the trailers and final status of a call.

        The peer address is attached whenever given, from either side.
        ``status_message`` is omitted when the status has no description.
        """
        payload = metadata_to_structured(metadata, self._max_metadata_bytes)
        self._emit(
            sequence_id,
            service_name,
            method_name,
            rpc_id,
            EventType.TRAILER,
            event_logger,
            metadata=payload.payload,
            payload_size=payload.size,
            payload_truncated=payload.truncated,
            peer_address=self._peer(peer_address),
            status_code=int(status.code),
            status_message=status.description or None,
        )

    def log_rpc_message(
        self,
        sequence_id: int,
        service_name: str,
        method_name: str,
        event_type: EventType,
        message: bytes,
        event_logger: EventLogger,
        rpc_id: str,
    ) -> None:
        """Log one request or response message of a call."""
        if event_type not in _MESSAGE_EVENTS:
            raise InvalidArgumentError(
                "event_type must be REQUEST_MESSAGE or RESPONSE_MESSAGE, "
                f"got {event_type.name}",
                argument="event_type",
            )
        payload = message_to_structured(message, self._max_message_bytes)
        self._emit(
            sequence_id,
            service_name,
            method_name,
            rpc_id,
            event_type,
            event_logger,
            message=payload.payload,
            payload_size=payload.size,
            payload_truncated=payload.truncated,
        )

    def log_half_close(
        self,
        sequence_id: int,
        service_name: str,
        method_name: str,
        event_logger: EventLogger,
        rpc_id: str,
    ) -> None:
        """Log that the client finished sending messages."""
        self._emit(sequence_id, service_name, method_name, rpc_id, EventType.HALF_CLOSE, event_logger)

    def log_cancel(
        self,
        sequence_id: int,
        service_name: str,
        method_name: str,
        event_logger: EventLogger,
        rpc_id: str,
    ) -> None:
        """Log that the call was cancelled."""
        self._emit(sequence_id, service_name, method_name, rpc_id, EventType.CANCEL, event_logger)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def extract_peer_address(attributes: Mapping[str, Any] | None) -> Any:
        """Return the transport peer address stored in call *attributes*, if any."""
        if not attributes:
            return None
        return attributes.get(TRANSPORT_ATTR_REMOTE_ADDR)

    @staticmethod
    def _peer(peer_address: Any) -> Address | None:
        return address_to_structured(peer_address) if peer_address is not None else None

    def _emit(
        self,
        sequence_id: int,
        service_name: str,
        method_name: str,
        rpc_id: str,
        event_type: EventType,
        event_logger: EventLogger,
        **fields: Any,
    ) -> None:
        record = LogRecord(
            timestamp=Timestamp.from_nanos(self._clock.time_ns()),
            sequence_id=sequence_id,
            service_name=service_name,
            method_name=method_name,
            rpc_id=rpc_id,
            event_type=event_type,
            event_logger=event_logger,
            log_level=LogLevel.DEBUG,
            **fields,
        )
        self._sink.write(record)


__all__ = ["LogHelper", "TRANSPORT_ATTR_REMOTE_ADDR"]
