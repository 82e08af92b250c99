"""Testing support – fakes and fixtures for code that emits RPC log records.

Import in your ``conftest.py``::

    pytest_plugins = ["rpc_observability.testing.fixtures"]
"""

from rpc_observability.testing.fakes import FAKE_CLOCK_NANOS, FakeClock, InMemorySink

__all__ = ["FAKE_CLOCK_NANOS", "FakeClock", "InMemorySink"]
