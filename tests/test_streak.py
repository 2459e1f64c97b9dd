"""Tests for streak tracking."""

from datetime import datetime, timedelta, timezone

import pytest

from src.finsavvy.models import UserStreak
from src.finsavvy.streak import is_personal_record, new_streak, summarize_streak, update_streak

LAST_VISIT = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def streak():
    return UserStreak(last_visit=LAST_VISIT, current_streak=3, longest_streak=5)


class TestUpdateStreak:
    """Tests for the 23/48-hour streak window."""

    @pytest.mark.parametrize("hours", [0, 1, 12, 22.9])
    def test_same_day_is_noop(self, streak, hours):
        """Test visits under 23 hours apart leave the streak unchanged."""
        updated = update_streak(streak, LAST_VISIT + timedelta(hours=hours))
        assert updated == streak

    def test_next_day_increments(self, streak):
        """Test a visit 30 hours later extends the streak by one."""
        now = LAST_VISIT + timedelta(hours=30)
        updated = update_streak(streak, now)
        assert updated.current_streak == 4
        assert updated.longest_streak == 5
        assert updated.last_visit == now

    def test_increment_raises_longest(self):
        """Test extending a record streak raises the longest streak."""
        streak = UserStreak(last_visit=LAST_VISIT, current_streak=5, longest_streak=5)
        updated = update_streak(streak, LAST_VISIT + timedelta(hours=30))
        assert updated.current_streak == 6
        assert updated.longest_streak == 6

    def test_boundary_23_hours_increments(self, streak):
        updated = update_streak(streak, LAST_VISIT + timedelta(hours=23))
        assert updated.current_streak == 4

    def test_missed_day_resets(self, streak):
        """Test a visit 50 hours later restarts the streak."""
        now = LAST_VISIT + timedelta(hours=50)
        updated = update_streak(streak, now)
        assert updated.current_streak == 1
        assert updated.longest_streak == 5
        assert updated.last_visit == now

    def test_boundary_48_hours_resets(self, streak):
        updated = update_streak(streak, LAST_VISIT + timedelta(hours=48))
        assert updated.current_streak == 1

    def test_new_streak(self):
        streak = new_streak(LAST_VISIT)
        assert streak.current_streak == 1
        assert streak.longest_streak == 1
        assert streak.last_visit == LAST_VISIT


class TestStreakSummary:
    """Tests for streak display helpers."""

    def test_summary_active(self, streak):
        summary = summarize_streak(streak, LAST_VISIT + timedelta(hours=47))
        assert summary.is_active
        assert summary.current == 3
        assert summary.longest == 5
        assert summary.last_visit == "2024-06-01"

    def test_summary_inactive(self, streak):
        summary = summarize_streak(streak, LAST_VISIT + timedelta(hours=48))
        assert not summary.is_active

    def test_personal_record(self):
        assert is_personal_record(
            UserStreak(last_visit=LAST_VISIT, current_streak=4, longest_streak=4)
        )
        assert not is_personal_record(new_streak(LAST_VISIT))
        assert not is_personal_record(
            UserStreak(last_visit=LAST_VISIT, current_streak=2, longest_streak=4)
        )
