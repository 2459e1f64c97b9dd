"""Tests for profile and streak persistence."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from langgraph.store.memory import InMemoryStore

from src.finsavvy.models import FinancialProfile, UserStreak
from src.finsavvy.storage import PROFILE_NAMESPACE, PersistenceError, UserRecordStore


class TestUserRecordStore:
    """Tests for loading and saving user records."""

    def test_missing_records_are_none(self, record_store):
        assert record_store.load_profile("nobody") is None
        assert record_store.load_streak("nobody") is None

    def test_profile_round_trip(self, record_store):
        profile = FinancialProfile(
            monthly_income=80000,
            monthly_expenses=45000,
            financial_goals=["Retirement Planning"],
            risk_tolerance="aggressive",
        )
        record_store.save_profile("u1", profile)
        assert record_store.load_profile("u1") == profile

    def test_streak_round_trip(self, record_store):
        streak = UserStreak(
            last_visit=datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc),
            current_streak=3,
            longest_streak=7,
        )
        record_store.save_streak("u1", streak)
        assert record_store.load_streak("u1") == streak

    def test_records_are_per_user(self, record_store):
        record_store.save_profile("u1", FinancialProfile(monthly_income=1000))
        assert record_store.load_profile("u2") is None

    def test_invalid_stored_profile(self):
        store = InMemoryStore()
        store.put(PROFILE_NAMESPACE, "u1", {"monthly_income": -5})
        with pytest.raises(PersistenceError):
            UserRecordStore(store).load_profile("u1")

    def test_store_read_failure(self):
        store = MagicMock()
        store.get.side_effect = ConnectionError("database unavailable")
        with pytest.raises(PersistenceError):
            UserRecordStore(store).load_streak("u1")

    def test_store_write_failure(self):
        store = MagicMock()
        store.put.side_effect = ConnectionError("database unavailable")
        with pytest.raises(PersistenceError) as exc_info:
            UserRecordStore(store).save_profile("u1", FinancialProfile())
        assert isinstance(exc_info.value.__cause__, ConnectionError)
