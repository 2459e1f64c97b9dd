"""Turn processing for advisor conversations.

``AdvisorEngine`` owns the per-user sessions (dialogue state, transcript and
streak) and talks to the record store. The graph computes each reply without
side effects; the engine writes any completed profile first and only then
commits the new dialogue state, so a failed write leaves the session exactly
as it was.

Engine methods block on the store and on market data, so async callers run
them in a worker thread. Turns for one user are serialised by a per-session
lock.
"""

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..models import (
    FinancialProfile,
    Message,
    ProfileSummary,
    SessionStart,
    StreakSummary,
    TurnResult,
    UserStreak,
)
from ..storage import PersistenceError, UserRecordStore
from ..streak import new_streak, summarize_streak, update_streak
from ..tools.calculators import calculate_financial_score
from ..tools.market_data import MarketDataProvider
from . import responses
from .dialogues import ProfileDialogue, RecommendationDialogue
from .graph import create_advisor_graph

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 10000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Session:
    """In-memory conversation state for one user."""

    streak: UserStreak
    profile_dialogue: ProfileDialogue = field(default_factory=ProfileDialogue)
    recommendation_dialogue: RecommendationDialogue = field(default_factory=RecommendationDialogue)
    transcript: list[Message] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def in_dialogue(self) -> bool:
        return self.profile_dialogue.active or self.recommendation_dialogue.active


class AdvisorEngine:
    """Process user messages one at a time against injected collaborators.

    Args:
        store: Persistence for profiles and streaks.
        market_data: Quote provider; defaults to simulated quotes.
        max_sessions: Open sessions kept in memory; the least recently used
            session is dropped beyond this.
    """

    def __init__(
        self,
        store: UserRecordStore,
        market_data: MarketDataProvider | None = None,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ):
        self._store = store
        self._graph = create_advisor_graph(market_data)
        self._sessions: OrderedDict[str, Session] = OrderedDict()
        self._sessions_lock = threading.Lock()
        self._max_sessions = max_sessions

    def _get_session(self, user_id: str) -> Session | None:
        with self._sessions_lock:
            session = self._sessions.get(user_id)
            if session is not None:
                self._sessions.move_to_end(user_id)
            return session

    def _register_session(self, user_id: str, session: Session) -> Session:
        """Add ``session`` unless another request opened one first; return the kept one."""
        with self._sessions_lock:
            existing = self._sessions.get(user_id)
            if existing is not None:
                return existing
            self._sessions[user_id] = session
            while len(self._sessions) > self._max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Evicted least recently used session for %s", evicted)
            return session

    def _open_session(
        self, user_id: str, now: datetime, name: str | None = None
    ) -> tuple[Session, bool]:
        committed = True
        try:
            previous = self._store.load_streak(user_id)
        except PersistenceError:
            previous, committed = None, False

        streak = new_streak(now) if previous is None else update_streak(previous, now)
        if committed and streak is not previous:
            try:
                self._store.save_streak(user_id, streak)
            except PersistenceError:
                committed = False

        greeting = Message(
            sender="assistant",
            content=responses.greeting(streak, name),
            timestamp=now,
            suggestions=list(responses.GREETING_SUGGESTIONS),
        )
        session = self._register_session(user_id, Session(streak=streak, transcript=[greeting]))
        logger.info("Started session for %s (streak %d)", user_id, session.streak.current_streak)
        return session, committed

    def start_session(
        self, user_id: str, now: datetime | None = None, name: str | None = None
    ) -> SessionStart:
        """Open a session, updating the streak once, and return the greeting.

        Calling it again for an open session returns the first greeting
        without touching the streak.
        """
        session = self._get_session(user_id)
        if session is not None:
            return SessionStart(greeting=session.transcript[0], streak=session.streak)

        session, committed = self._open_session(user_id, now or _utcnow(), name)
        return SessionStart(greeting=session.transcript[0], streak=session.streak, committed=committed)

    def process_turn(self, user_id: str, raw_text: str, now: datetime | None = None) -> TurnResult:
        """Handle one user message and return the advisor's reply.

        ``committed`` is False when the store failed; in that case neither the
        dialogue state nor the transcript changed and the message can be resent.
        """
        now = now or _utcnow()
        session = self._get_session(user_id) or self._open_session(user_id, now)[0]

        with session.lock:
            try:
                profile = self._store.load_profile(user_id) or FinancialProfile()
            except PersistenceError:
                return TurnResult(
                    response_text=responses.LOAD_FAILED_RESPONSE,
                    suggested_replies=list(responses.RETRY_SUGGESTIONS),
                    committed=False,
                )
            return self._respond(session, profile, raw_text, now, user_id)

    def process_anonymous_turn(self, raw_text: str, now: datetime | None = None) -> TurnResult:
        """Answer a message from an unidentified caller.

        Nothing is kept: no session is registered and no streak or profile is
        stored, so a dialogue started here cannot be continued.
        """
        now = now or _utcnow()
        return self._respond(Session(streak=new_streak(now)), FinancialProfile(), raw_text, now)

    def _respond(
        self,
        session: Session,
        profile: FinancialProfile,
        raw_text: str,
        now: datetime,
        user_id: str | None = None,
    ) -> TurnResult:
        result = self._graph.invoke(
            {
                "message": raw_text,
                "profile": profile,
                "profile_dialogue": session.profile_dialogue,
                "recommendation_dialogue": session.recommendation_dialogue,
                "skipped_intents": [],
                "response": None,
                "completed_profile": None,
            }
        )
        intent = result["intent"]

        completed_profile = result.get("completed_profile")
        if completed_profile is not None and user_id is not None:
            try:
                self._store.save_profile(user_id, completed_profile)
            except PersistenceError:
                return TurnResult(
                    response_text=responses.SAVE_FAILED_RESPONSE,
                    suggested_replies=list(responses.RETRY_SUGGESTIONS),
                    intent=intent,
                    committed=False,
                )
            logger.info("Saved financial profile for %s", user_id)

        session.profile_dialogue = result["profile_dialogue"]
        session.recommendation_dialogue = result["recommendation_dialogue"]

        if session.in_dialogue():
            suggestions = list(responses.DIALOGUE_SUGGESTIONS)
        else:
            suggestions = list(responses.DEFAULT_SUGGESTIONS)

        reply = Message(
            sender="assistant",
            content=result["response"],
            timestamp=now,
            suggestions=suggestions,
        )
        session.transcript.extend([Message(sender="user", content=raw_text, timestamp=now), reply])

        return TurnResult(response_text=reply.content, suggested_replies=suggestions, intent=intent)

    def transcript(self, user_id: str) -> list[Message]:
        session = self._get_session(user_id)
        return list(session.transcript) if session else []

    def profile_summary(self, user_id: str) -> ProfileSummary:
        profile = self._store.load_profile(user_id) or FinancialProfile()
        streak = self._store.load_streak(user_id)
        return ProfileSummary(
            monthly_income=profile.monthly_income,
            monthly_expenses=profile.monthly_expenses,
            surplus=profile.surplus,
            risk_tolerance=profile.risk_tolerance,
            goals_count=len(profile.financial_goals),
            financial_score=calculate_financial_score(
                profile, streak.current_streak if streak else 0
            ),
        )

    def streak_summary(self, user_id: str, now: datetime | None = None) -> StreakSummary:
        now = now or _utcnow()
        streak = self._store.load_streak(user_id) or new_streak(now)
        return summarize_streak(streak, now)
