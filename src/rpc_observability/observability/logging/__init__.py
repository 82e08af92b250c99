"""Observability – local diagnostic logging helpers."""
from rpc_observability.observability.logging.factory import JsonLoggerFactory
from rpc_observability.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
