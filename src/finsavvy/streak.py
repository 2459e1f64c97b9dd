"""Daily engagement streak tracking."""

from datetime import datetime

from .models import StreakSummary, UserStreak

# A visit counts towards the streak once this many hours have passed...
STREAK_INCREMENT_HOURS = 23
# ...and breaks it when this many hours have passed.
STREAK_BREAK_HOURS = 48


def _hours_between(earlier: datetime, later: datetime) -> float:
    return (later - earlier).total_seconds() / 3600


def new_streak(now: datetime) -> UserStreak:
    """Streak for a user with no stored record."""
    return UserStreak(last_visit=now, current_streak=1, longest_streak=1)


def update_streak(previous: UserStreak, now: datetime) -> UserStreak:
    """Apply one session start at ``now`` to ``previous``.

    Visits less than 23 hours apart leave the streak untouched, visits within
    48 hours extend it, and anything later restarts it at 1 while keeping the
    longest streak.
    """
    hours = _hours_between(previous.last_visit, now)

    if hours < STREAK_INCREMENT_HOURS:
        return previous

    if hours < STREAK_BREAK_HOURS:
        current = previous.current_streak + 1
        return UserStreak(
            last_visit=now,
            current_streak=current,
            longest_streak=max(previous.longest_streak, current),
        )

    return UserStreak(
        last_visit=now,
        current_streak=1,
        longest_streak=previous.longest_streak,
    )


def is_personal_record(streak: UserStreak) -> bool:
    return streak.current_streak == streak.longest_streak and streak.current_streak > 1


def summarize_streak(streak: UserStreak, now: datetime) -> StreakSummary:
    """Summarise a streak for display; active means the streak is not yet broken."""
    return StreakSummary(
        current=streak.current_streak,
        longest=streak.longest_streak,
        last_visit=streak.last_visit.date().isoformat(),
        is_active=_hours_between(streak.last_visit, now) < STREAK_BREAK_HOURS,
    )
