"""Per-user persistence of financial profiles and streaks.

Records live in a LangGraph ``BaseStore`` (``InMemoryStore`` in development,
``PostgresStore`` in production), one item per user id.
"""

import logging

from langgraph.store.base import BaseStore
from pydantic import ValidationError

from .models import FinancialProfile, UserStreak

logger = logging.getLogger(__name__)

PROFILE_NAMESPACE = ("financial_profiles",)
STREAK_NAMESPACE = ("streaks",)


class PersistenceError(Exception):
    """A record could not be read from or written to the store."""


class UserRecordStore:
    """Load and save user records, mapping store failures to ``PersistenceError``."""

    def __init__(self, store: BaseStore):
        self._store = store

    def _load(self, namespace: tuple[str, ...], user_id: str) -> dict | None:
        try:
            item = self._store.get(namespace, user_id)
        except Exception as e:
            logger.warning("Failed to load %s for %s: %s", namespace[0], user_id, e)
            raise PersistenceError(f"Could not load {namespace[0]} for {user_id}") from e
        return item.value if item is not None else None

    def _save(self, namespace: tuple[str, ...], user_id: str, value: dict) -> None:
        try:
            self._store.put(namespace, user_id, value)
        except Exception as e:
            logger.warning("Failed to save %s for %s: %s", namespace[0], user_id, e)
            raise PersistenceError(f"Could not save {namespace[0]} for {user_id}") from e

    def load_profile(self, user_id: str) -> FinancialProfile | None:
        value = self._load(PROFILE_NAMESPACE, user_id)
        if value is None:
            return None
        try:
            return FinancialProfile.model_validate(value)
        except ValidationError as e:
            raise PersistenceError(f"Stored profile for {user_id} is invalid") from e

    def save_profile(self, user_id: str, profile: FinancialProfile) -> None:
        self._save(PROFILE_NAMESPACE, user_id, profile.model_dump(mode="json"))

    def load_streak(self, user_id: str) -> UserStreak | None:
        value = self._load(STREAK_NAMESPACE, user_id)
        if value is None:
            return None
        try:
            return UserStreak.model_validate(value)
        except ValidationError as e:
            raise PersistenceError(f"Stored streak for {user_id} is invalid") from e

    def save_streak(self, user_id: str, streak: UserStreak) -> None:
        self._save(STREAK_NAMESPACE, user_id, streak.model_dump(mode="json"))
