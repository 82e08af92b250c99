"""Testing fixtures – fake_clock."""
from __future__ import annotations

import pytest


@pytest.fixture
def fake_clock():
    """Pytest fixture: returns a FakeClock pinned to 9876.000054321 seconds past the epoch."""
    from rpc_observability.testing.fakes import FakeClock
    return FakeClock()


__all__ = ["fake_clock"]
