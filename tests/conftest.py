"""Shared test configuration and fixtures."""

from datetime import timedelta

import pytest

from convograph.memory.clock import FixedClock
from convograph.memory.graph_store import GraphStore


@pytest.fixture
def clock() -> FixedClock:
    """A clock that starts at 2024-01-15T10:00Z and never advances."""
    return FixedClock()


@pytest.fixture
def ticking_clock() -> FixedClock:
    """A clock that advances one second per reading."""
    return FixedClock(step=timedelta(seconds=1))


@pytest.fixture
def store(clock) -> GraphStore:
    return GraphStore(clock=clock)
