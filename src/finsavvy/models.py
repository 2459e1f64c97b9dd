"""Core data models for the financial advisor."""

import uuid
from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RiskTolerance = Literal["conservative", "moderate", "aggressive"]


class Intent(str, Enum):
    """Classified purpose of an inbound message."""

    CONTINUE_RECOMMENDATION_DIALOGUE = "continue_recommendation_dialogue"
    CONTINUE_PROFILE_DIALOGUE = "continue_profile_dialogue"
    EXPLAIN_CONCEPT = "explain_concept"
    START_RECOMMENDATION_DIALOGUE = "start_recommendation_dialogue"
    GOLD_RATE_QUERY = "gold_rate_query"
    FUND_PERFORMANCE_QUERY = "fund_performance_query"
    MARKET_QUERY = "market_query"
    START_PROFILE_DIALOGUE = "start_profile_dialogue"
    TAX_GUIDANCE = "tax_guidance"
    INVESTMENT_GUIDANCE = "investment_guidance"
    SCHEME_GUIDANCE = "scheme_guidance"
    FALLBACK_MENU = "fallback_menu"


class FinancialProfile(BaseModel):
    """Persistent user financial profile collected through conversation."""

    monthly_income: float = Field(default=0, ge=0, description="Monthly in-hand income")
    monthly_expenses: float = Field(default=0, ge=0, description="Total monthly expenses")
    financial_goals: list[str] = Field(default_factory=list, description="Goal tags")
    risk_tolerance: RiskTolerance = "moderate"
    investment_timeline: Literal["short", "medium", "long"] = "medium"
    current_investments: float = Field(default=0, ge=0)
    emergency_fund: float = Field(default=0, ge=0)
    age: int = Field(default=25, gt=0)
    dependents: int = Field(default=0, ge=0)

    @property
    def surplus(self) -> float:
        return self.monthly_income - self.monthly_expenses

    def has_income(self) -> bool:
        """Check if a monthly income has been recorded."""
        return self.monthly_income > 0


class UserStreak(BaseModel):
    """Daily engagement streak for one user."""

    model_config = ConfigDict(frozen=True)

    last_visit: datetime
    current_streak: int = Field(default=1, ge=1)
    longest_streak: int = Field(default=1, ge=1)


class StreakSummary(BaseModel):
    """Streak figures for display."""

    current: int
    longest: int
    last_visit: str
    is_active: bool


class ProfileSummary(BaseModel):
    """Profile figures for display."""

    monthly_income: float
    monthly_expenses: float
    surplus: float
    risk_tolerance: RiskTolerance
    goals_count: int
    financial_score: float = Field(description="Financial health score out of 10")


class RecommendationRequest(BaseModel):
    """Slots collected by the child-investment dialogue. Never persisted."""

    child_age: int
    monthly_budget: int
    goal: str
    risk_tolerance: str


class Message(BaseModel):
    """Immutable conversation transcript entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    sender: Literal["user", "assistant"]
    content: str
    timestamp: datetime
    suggestions: list[str] | None = None


class FundAllocation(BaseModel):
    """One line of a child investment plan."""

    name: str
    weight: float
    amount: int
    kind: Literal["fund", "insurance"] = "fund"


class ChildRecommendation(BaseModel):
    """Structured output of the child-investment recommendation."""

    request: RecommendationRequest
    tier: Literal["Starter", "Balanced", "Premium"]
    years_to_maturity: int
    total_investment: int
    allocations: list[FundAllocation]
    maturity_low: int
    maturity_high: int

    @property
    def fund_total(self) -> int:
        return sum(a.amount for a in self.allocations if a.kind == "fund")

    @property
    def insurance_total(self) -> int:
        return sum(a.amount for a in self.allocations if a.kind == "insurance")


class FinancialPlan(BaseModel):
    """Structured output of the general financial plan."""

    profile: FinancialProfile
    surplus: float
    emergency_target: float
    tax_saving_limit: float
    monthly_elss_sip: int
    allocation_percentages: dict[str, int]
    allocations: dict[str, int]
    estimated_tax_savings: int
    projected_wealth_lakhs: int
    fund_suggestions: list[str]


class SessionStart(BaseModel):
    """Greeting and streak shown when a user opens a session."""

    greeting: Message
    streak: UserStreak
    committed: bool = True


class TurnResult(BaseModel):
    """Outcome of processing one user message."""

    response_text: str
    suggested_replies: list[str] = Field(default_factory=list)
    intent: Intent | None = None
    committed: bool = True
