"""Pytest fixtures for testing."""

import os
from datetime import datetime, timezone

import pytest
from langgraph.store.memory import InMemoryStore

# Set test environment variables before importing app modules
os.environ.setdefault("API_TOKEN", "dev-token-12345")
os.environ.setdefault("MARKET_DATA_SOURCE", "simulated")

from src.finsavvy.agent.engine import AdvisorEngine  # noqa: E402
from src.finsavvy.storage import UserRecordStore  # noqa: E402
from src.finsavvy.tools.market_data import SimulatedMarketData  # noqa: E402


@pytest.fixture
def api_token():
    """Return the test API token."""
    return "dev-token-12345"


@pytest.fixture
def auth_headers(api_token):
    """Return authorization headers for API requests."""
    return {"Authorization": f"Bearer {api_token}"}


@pytest.fixture
def now():
    """A fixed point in time for deterministic streaks and timestamps."""
    return datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def record_store():
    """User record store over a fresh in-memory LangGraph store."""
    return UserRecordStore(InMemoryStore())


@pytest.fixture
def engine(record_store, now):
    """Advisor engine with simulated quotes stamped at ``now``."""
    return AdvisorEngine(record_store, market_data=SimulatedMarketData(clock=lambda: now))
