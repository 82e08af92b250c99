"""
rpc_observability – structured logging data-plane for RPC calls.

Import path convention::

    from rpc_observability.observability.rpc_logging import LogHelper, Sink
    from rpc_observability.adapters.gcp import GcpLogSink
    from rpc_observability.kernel.errors import InvalidArgumentError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
