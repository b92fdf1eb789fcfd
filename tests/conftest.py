"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Controllable clocks for message expiry and timestamps
- In-memory state store and recording notification sink
- A wired Dashboard
"""

import pytest

from src.adapters.storage.memory import InMemoryStateStore
from src.domain.dashboard import Dashboard
from tests.fakes import GATE_SECRET, FakeClock, FakeNow, RecordingSink


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def now() -> FakeNow:
    return FakeNow()


@pytest.fixture
def store() -> InMemoryStateStore:
    return InMemoryStateStore()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def dashboard(store: InMemoryStateStore, sink: RecordingSink, clock: FakeClock, now: FakeNow) -> Dashboard:
    """Dashboard over an empty in-memory store."""
    board = Dashboard.create(store=store, sink=sink, gate_secret=GATE_SECRET, clock=clock, now=now)
    board.load()
    return board
