"""Testing fixtures – pytest fixtures for fake doubles.

Enable in a consumer's ``conftest.py``::

    pytest_plugins = ["rpc_observability.testing.fixtures"]
"""
from rpc_observability.testing.fixtures.clock import fake_clock
from rpc_observability.testing.fixtures.sink import in_memory_sink, log_helper

__all__ = [
    "fake_clock",
    "in_memory_sink",
    "log_helper",
]
