"""Testing fakes – in-memory doubles for kernel and sink ports."""
from rpc_observability.testing.fakes.clock import FAKE_CLOCK_NANOS, FakeClock
from rpc_observability.testing.fakes.sink import InMemorySink
from rpc_observability.kernel.time import FrozenClock

__all__ = [
    "FAKE_CLOCK_NANOS",
    "FakeClock",
    "FrozenClock",
    "InMemorySink",
]
