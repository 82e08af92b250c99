"""RPC logging – event-to-record assembly and log sinks."""
from rpc_observability.observability.rpc_logging.record import (
    Address,
    AddressType,
    Duration,
    EventLogger,
    EventType,
    LogLevel,
    LogRecord,
    Metadata,
    MetadataEntry,
    Timestamp,
)
from rpc_observability.observability.rpc_logging.address import address_to_structured
from rpc_observability.observability.rpc_logging.payload import (
    PayloadBuilder,
    message_to_structured,
    metadata_to_structured,
)
from rpc_observability.observability.rpc_logging.status import CallStatus, StatusCode
from rpc_observability.observability.rpc_logging.settings import RpcLoggingSettings
from rpc_observability.observability.rpc_logging.sink import Sink
from rpc_observability.observability.rpc_logging.local import StructlogSink
from rpc_observability.observability.rpc_logging.helper import TRANSPORT_ATTR_REMOTE_ADDR, LogHelper

__all__ = [
    "Address",
    "AddressType",
    "CallStatus",
    "Duration",
    "EventLogger",
    "EventType",
    "LogHelper",
    "LogLevel",
    "LogRecord",
    "Metadata",
    "MetadataEntry",
    "PayloadBuilder",
    "RpcLoggingSettings",
    "Sink",
    "StatusCode",
    "StructlogSink",
    "TRANSPORT_ATTR_REMOTE_ADDR",
    "Timestamp",
    "address_to_structured",
    "message_to_structured",
    "metadata_to_structured",
]
