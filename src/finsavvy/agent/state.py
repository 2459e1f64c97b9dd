"""LangGraph state for one advisor turn."""

from typing_extensions import TypedDict

from ..models import FinancialProfile, Intent
from .dialogues import ProfileDialogue, RecommendationDialogue


class AdvisorState(TypedDict, total=False):
    """State flowing through the advisor graph for a single message."""

    message: str
    profile: FinancialProfile
    profile_dialogue: ProfileDialogue
    recommendation_dialogue: RecommendationDialogue
    intent: Intent
    # Quote-backed intents that had no data and must be passed over on re-routing
    skipped_intents: list[Intent]
    response: str | None
    # Set when the profile dialogue completes; persisted by the engine
    completed_profile: FinancialProfile | None
