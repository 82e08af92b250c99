"""Observability – local diagnostic logging and the RPC log data-plane."""

from rpc_observability.observability.logging import JsonLoggerFactory, get_logger
from rpc_observability.observability.rpc_logging import LogHelper, LogRecord, Sink, StructlogSink

__all__ = [
    "JsonLoggerFactory",
    "LogHelper",
    "LogRecord",
    "Sink",
    "StructlogSink",
    "get_logger",
]
