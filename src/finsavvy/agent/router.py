"""Keyword-based intent classification.

Rules are checked in a fixed priority order and the first match wins. A
message can match several rules ("what is SIP and start my child plan"), so
reordering ``RULES`` changes behaviour.
"""

from collections.abc import Callable, Collection
from dataclasses import dataclass

from ..models import Intent

EXPLAIN_KEYWORDS = ("what is", "explain", "define", "meaning of")
CHILD_KEYWORDS = (
    "child plan",
    "lic child",
    "compare lic",
    "child investment",
    "kid",
    "daughter",
    "son",
)
GOLD_KEYWORDS = ("gold rate", "current gold", "gold price")
FUND_PERFORMANCE_KEYWORDS = ("mutual fund", "sip rates", "fund performance")
MARKET_KEYWORDS = ("market", "stock", "nifty", "sensex")
PLANNING_KEYWORDS = ("plan", "financial plan")
TAX_KEYWORDS = ("tax", "save tax", "80c")
INVESTMENT_KEYWORDS = ("invest", "mutual fund", "sip")
SCHEME_KEYWORDS = ("ppf", "nps", "sukanya", "government scheme")


@dataclass(frozen=True)
class RouterContext:
    """What the router needs to know about the session."""

    recommendation_active: bool = False
    profile_active: bool = False
    has_income: bool = False


def _contains_any(message: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in message for keyword in keywords)


def _keywords(keywords: tuple[str, ...]) -> Callable[[str, RouterContext], bool]:
    return lambda message, _context: _contains_any(message, keywords)


def _wants_plan(message: str, context: RouterContext) -> bool:
    if _contains_any(message, PLANNING_KEYWORDS):
        return True
    return "income" in message and not context.has_income


RULES: list[tuple[Intent, Callable[[str, RouterContext], bool]]] = [
    (Intent.CONTINUE_RECOMMENDATION_DIALOGUE, lambda _m, c: c.recommendation_active),
    (Intent.CONTINUE_PROFILE_DIALOGUE, lambda _m, c: c.profile_active),
    (Intent.EXPLAIN_CONCEPT, _keywords(EXPLAIN_KEYWORDS)),
    (Intent.START_RECOMMENDATION_DIALOGUE, _keywords(CHILD_KEYWORDS)),
    (Intent.GOLD_RATE_QUERY, _keywords(GOLD_KEYWORDS)),
    (Intent.FUND_PERFORMANCE_QUERY, _keywords(FUND_PERFORMANCE_KEYWORDS)),
    (Intent.MARKET_QUERY, _keywords(MARKET_KEYWORDS)),
    (Intent.START_PROFILE_DIALOGUE, _wants_plan),
    (Intent.TAX_GUIDANCE, _keywords(TAX_KEYWORDS)),
    (Intent.INVESTMENT_GUIDANCE, _keywords(INVESTMENT_KEYWORDS)),
    (Intent.SCHEME_GUIDANCE, _keywords(SCHEME_KEYWORDS)),
]


def route(message: str, context: RouterContext, skip: Collection[Intent] = ()) -> Intent:
    """Classify ``message`` into an intent.

    Args:
        message: Raw user text.
        context: Active dialogues and profile facts for the session.
        skip: Intents to pass over, used when a quote-backed handler had no
            data and the message should fall through to the next rule.

    Returns:
        The first matching intent, or ``Intent.FALLBACK_MENU``.
    """
    lowered = message.lower()
    for intent, matches in RULES:
        if intent in skip:
            continue
        if matches(lowered, context):
            return intent
    return Intent.FALLBACK_MENU
