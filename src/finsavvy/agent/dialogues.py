"""Slot-filling dialogues: financial profile and child-investment recommendation.

Each dialogue is a linear sequence of steps. One slot is validated and stored
per turn; a turn that fails validation re-prompts without advancing, and there
is no retry limit.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..models import FinancialProfile, RecommendationRequest, RiskTolerance
from . import responses

logger = logging.getLogger(__name__)

AMOUNT_PATTERN = re.compile(r"\d[\d,]*(?:\.\d+)?")
INTEGER_PATTERN = re.compile(r"\d+")
BUDGET_PATTERN = re.compile(r"₹?(\d+(?:,\d+)*)")

GOAL_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("house", "home"), "Home Purchase"),
    (("car", "vehicle"), "Vehicle Purchase"),
    (("education", "child"), "Child Education"),
    (("retirement",), "Retirement Planning"),
    (("emergency",), "Emergency Fund"),
]
CONSERVATIVE_KEYWORDS = ("conservative", "low", "safe")
AGGRESSIVE_KEYWORDS = ("aggressive", "high", "growth")


class ProfileStep(str, Enum):
    INCOME = "income"
    EXPENSES = "expenses"
    GOALS = "goals"
    RISK = "risk"


class RecommendationStep(str, Enum):
    CHILD_AGE = "child_age"
    BUDGET = "budget"
    GOAL = "goal"
    RISK = "risk"


class ProfileAnswers(BaseModel):
    """Partial profile collected so far."""

    model_config = ConfigDict(frozen=True)

    monthly_income: float | None = None
    monthly_expenses: float | None = None
    financial_goals: list[str] | None = None
    risk_tolerance: RiskTolerance | None = None

    def apply_to(self, profile: FinancialProfile) -> FinancialProfile:
        """Merge the collected slots into ``profile``, keeping its other fields."""
        updates = self.model_dump(exclude_none=True)
        return FinancialProfile(**{**profile.model_dump(), **updates})


class RecommendationAnswers(BaseModel):
    """Partial recommendation request collected so far."""

    model_config = ConfigDict(frozen=True)

    child_age: int | None = None
    monthly_budget: int | None = None
    goal: str | None = None


class ProfileDialogue(BaseModel):
    model_config = ConfigDict(frozen=True)

    active: bool = False
    current_step: ProfileStep | None = None
    collected: ProfileAnswers = Field(default_factory=ProfileAnswers)

    def advance(self, step: ProfileStep, **slots) -> "ProfileDialogue":
        return self.model_copy(
            update={"current_step": step, "collected": self.collected.model_copy(update=slots)}
        )


class RecommendationDialogue(BaseModel):
    model_config = ConfigDict(frozen=True)

    active: bool = False
    current_step: RecommendationStep | None = None
    collected: RecommendationAnswers = Field(default_factory=RecommendationAnswers)

    def advance(self, step: RecommendationStep, **slots) -> "RecommendationDialogue":
        return self.model_copy(
            update={"current_step": step, "collected": self.collected.model_copy(update=slots)}
        )


@dataclass(frozen=True)
class StepOutcome:
    """Result of one dialogue turn.

    ``response`` is None on the terminal step, where the caller renders the
    generated plan from ``completed``.
    """

    dialogue: ProfileDialogue | RecommendationDialogue
    response: str | None = None
    completed: ProfileAnswers | RecommendationRequest | None = None
    advanced: bool = False


def extract_amount(text: str) -> float | None:
    """Extract the first non-negative decimal number, ignoring thousands separators."""
    match = AMOUNT_PATTERN.search(text)
    if not match:
        return None
    return float(match.group().replace(",", ""))


def extract_integer(text: str) -> int | None:
    match = INTEGER_PATTERN.search(text)
    return int(match.group()) if match else None


def extract_budget(text: str) -> int | None:
    """Extract a rupee amount such as "₹3,000" or "5000 monthly"."""
    match = BUDGET_PATTERN.search(text)
    if not match:
        return None
    return int(match.group(1).replace(",", ""))


def detect_goals(text: str) -> list[str]:
    lowered = text.lower()
    return [goal for keywords, goal in GOAL_KEYWORDS if any(k in lowered for k in keywords)]


def classify_risk(text: str) -> RiskTolerance:
    """Map free text to a risk tolerance, defaulting to moderate."""
    lowered = text.lower()
    if any(k in lowered for k in CONSERVATIVE_KEYWORDS):
        return "conservative"
    if any(k in lowered for k in AGGRESSIVE_KEYWORDS):
        return "aggressive"
    return "moderate"


def start_profile_dialogue() -> ProfileDialogue:
    return ProfileDialogue(active=True, current_step=ProfileStep.INCOME)


def start_recommendation_dialogue() -> RecommendationDialogue:
    return RecommendationDialogue(active=True, current_step=RecommendationStep.CHILD_AGE)


def handle_profile_step(dialogue: ProfileDialogue, raw_input: str) -> StepOutcome:
    """Validate ``raw_input`` for the current profile step and advance."""
    step = dialogue.current_step
    collected = dialogue.collected

    if not dialogue.active or step is None:
        return StepOutcome(dialogue=start_profile_dialogue(), response=responses.PROFILE_START)

    if step is ProfileStep.INCOME:
        income = extract_amount(raw_input)
        if income is None or income <= 0:
            return StepOutcome(dialogue=dialogue, response=responses.INCOME_REPROMPT)
        logger.info("Profile dialogue: income recorded")
        return StepOutcome(
            dialogue=dialogue.advance(ProfileStep.EXPENSES, monthly_income=income),
            response=responses.expenses_prompt(income),
            advanced=True,
        )

    if step is ProfileStep.EXPENSES:
        expenses = extract_amount(raw_input)
        if expenses is None:
            return StepOutcome(dialogue=dialogue, response=responses.EXPENSES_REPROMPT)
        surplus = (collected.monthly_income or 0) - expenses
        logger.info("Profile dialogue: expenses recorded")
        return StepOutcome(
            dialogue=dialogue.advance(ProfileStep.GOALS, monthly_expenses=expenses),
            response=responses.goals_prompt(expenses, surplus),
            advanced=True,
        )

    if step is ProfileStep.GOALS:
        goals = detect_goals(raw_input)
        return StepOutcome(
            dialogue=dialogue.advance(ProfileStep.RISK, financial_goals=goals),
            response=responses.risk_prompt(goals),
            advanced=True,
        )

    # ProfileStep.RISK is terminal
    answers = collected.model_copy(update={"risk_tolerance": classify_risk(raw_input)})
    if answers.financial_goals is None:
        answers = answers.model_copy(update={"financial_goals": []})
    logger.info("Profile dialogue complete")
    return StepOutcome(dialogue=ProfileDialogue(), completed=answers, advanced=True)


def handle_recommendation_step(dialogue: RecommendationDialogue, raw_input: str) -> StepOutcome:
    """Validate ``raw_input`` for the current recommendation step and advance."""
    step = dialogue.current_step
    collected = dialogue.collected

    if not dialogue.active or step is None:
        return StepOutcome(
            dialogue=start_recommendation_dialogue(), response=responses.RECOMMENDATION_START
        )

    if step is RecommendationStep.CHILD_AGE:
        age = extract_integer(raw_input)
        if age is None:
            return StepOutcome(dialogue=dialogue, response=responses.CHILD_AGE_REPROMPT)
        return StepOutcome(
            dialogue=dialogue.advance(RecommendationStep.BUDGET, child_age=age),
            response=responses.budget_prompt(age),
            advanced=True,
        )

    if step is RecommendationStep.BUDGET:
        budget = extract_budget(raw_input)
        if budget is None:
            return StepOutcome(dialogue=dialogue, response=responses.BUDGET_REPROMPT)
        return StepOutcome(
            dialogue=dialogue.advance(RecommendationStep.GOAL, monthly_budget=budget),
            response=responses.recommendation_goal_prompt(budget),
            advanced=True,
        )

    if step is RecommendationStep.GOAL:
        return StepOutcome(
            dialogue=dialogue.advance(RecommendationStep.RISK, goal=raw_input),
            response=responses.recommendation_risk_prompt(raw_input),
            advanced=True,
        )

    # RecommendationStep.RISK is terminal
    request = RecommendationRequest(
        child_age=collected.child_age,
        monthly_budget=collected.monthly_budget,
        goal=collected.goal,
        risk_tolerance=raw_input,
    )
    logger.info("Recommendation dialogue complete")
    return StepOutcome(dialogue=RecommendationDialogue(), completed=request, advanced=True)
