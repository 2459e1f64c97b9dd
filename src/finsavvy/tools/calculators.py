"""Deterministic recommendation and plan calculators.

Per-fund splits are floored; aggregate figures are rounded half-up.
"""

import math

from ..knowledge import FUND_SUGGESTIONS
from ..models import (
    ChildRecommendation,
    FinancialPlan,
    FinancialProfile,
    FundAllocation,
    RecommendationRequest,
)

CHILD_MATURITY_AGE = 18
TAX_SAVING_CAP = 150000
TAX_SAVING_INCOME_SHARE = 0.10
TAX_SAVING_RATE = 0.31
EMERGENCY_FUND_MONTHS = 6

# (upper budget bound or None, tier, [(name, weight, kind)], maturity multipliers)
CHILD_PLAN_TIERS = [
    (
        2000,
        "Starter",
        [
            ("Axis Bluechip Fund", 0.4, "fund"),
            ("Mirae Asset Emerging Bluechip", 0.3, "fund"),
            ("LIC Jeevan Tarun", 0.3, "insurance"),
        ],
        (2.2, 2.8),
    ),
    (
        5000,
        "Balanced",
        [
            ("Axis Bluechip Fund", 0.25, "fund"),
            ("Parag Parikh Flexi Cap", 0.25, "fund"),
            ("ELSS Tax Saver", 0.1, "fund"),
            ("LIC Child Plan", 0.4, "insurance"),
        ],
        (2.5, 3.5),
    ),
    (
        None,
        "Premium",
        [
            ("Large Cap Fund", 0.3, "fund"),
            ("Mid Cap Fund", 0.2, "fund"),
            ("International Fund", 0.1, "fund"),
            ("ELSS Fund", 0.1, "fund"),
            ("LIC Premium Plan", 0.3, "insurance"),
        ],
        (3.2, 4.5),
    ),
]

# emergency / debt / equity shares of the monthly surplus
ALLOCATION_WEIGHTS = {
    "conservative": {"emergency": 0.40, "debt": 0.35, "equity": 0.25},
    "moderate": {"emergency": 0.25, "debt": 0.35, "equity": 0.40},
    "aggressive": {"emergency": 0.20, "debt": 0.25, "equity": 0.55},
}

# Whole percentages, for display only
ALLOCATION_PERCENTAGES = {
    risk: {bucket: round(weight * 100) for bucket, weight in weights.items()}
    for risk, weights in ALLOCATION_WEIGHTS.items()
}

GROWTH_FACTORS = {"conservative": 1.08, "moderate": 1.12, "aggressive": 1.15}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def select_tier(monthly_budget: int):
    """Pick the first tier whose upper bound is above the budget; the last tier is unbounded."""
    _upper, tier, funds, multipliers = next(
        row for row in CHILD_PLAN_TIERS if row[0] is None or monthly_budget < row[0]
    )
    return tier, funds, multipliers


def generate_child_recommendation(request: RecommendationRequest) -> ChildRecommendation:
    """Build the child-investment plan for a completed recommendation request.

    The horizon runs to age 18 and is not validated, so a child aged 18 or
    more yields a zero or negative horizon and total.
    """
    years = CHILD_MATURITY_AGE - request.child_age
    total = request.monthly_budget * 12 * years
    tier, funds, (low, high) = select_tier(request.monthly_budget)

    allocations = [
        FundAllocation(
            name=name,
            weight=weight,
            amount=math.floor(request.monthly_budget * weight),
            kind=kind,
        )
        for name, weight, kind in funds
    ]

    return ChildRecommendation(
        request=request,
        tier=tier,
        years_to_maturity=years,
        total_investment=total,
        allocations=allocations,
        maturity_low=math.floor(total * low),
        maturity_high=math.floor(total * high),
    )


def generate_financial_plan(profile: FinancialProfile) -> FinancialPlan:
    """Build the general financial plan from a completed profile."""
    surplus = profile.monthly_income - profile.monthly_expenses
    tax_saving_limit = min(
        TAX_SAVING_CAP, profile.monthly_income * 12 * TAX_SAVING_INCOME_SHARE
    )
    weights = ALLOCATION_WEIGHTS[profile.risk_tolerance]
    growth = GROWTH_FACTORS[profile.risk_tolerance]

    return FinancialPlan(
        profile=profile,
        surplus=surplus,
        emergency_target=profile.monthly_expenses * EMERGENCY_FUND_MONTHS,
        tax_saving_limit=tax_saving_limit,
        monthly_elss_sip=round_half_up(tax_saving_limit / 12),
        allocation_percentages=dict(ALLOCATION_PERCENTAGES[profile.risk_tolerance]),
        allocations={
            bucket: round_half_up(surplus * weight) for bucket, weight in weights.items()
        },
        estimated_tax_savings=round_half_up(tax_saving_limit * TAX_SAVING_RATE),
        projected_wealth_lakhs=round_half_up(surplus * 12 * 10 * growth / 100000),
        fund_suggestions=list(FUND_SUGGESTIONS[profile.risk_tolerance]),
    )


def calculate_financial_score(profile: FinancialProfile, current_streak: int = 0) -> float:
    """Financial health score out of 10, shown with the profile summary.

    Starts at 5 and adds points for a positive surplus, a savings rate above
    20%, having goals, a streak longer than a week and a recorded income.
    """
    score = 5.0
    if profile.surplus > 0:
        score += 2.0
    if profile.surplus > profile.monthly_income * 0.2:
        score += 1.0
    if profile.financial_goals:
        score += 1.0
    if current_streak > 7:
        score += 0.5
    if profile.has_income():
        score += 0.5
    return round(min(10.0, score), 1)
