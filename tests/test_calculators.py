"""Tests for the recommendation and plan calculators."""

import pytest

from src.finsavvy.knowledge import FUND_SUGGESTIONS
from src.finsavvy.models import FinancialProfile, RecommendationRequest
from src.finsavvy.tools.calculators import (
    ALLOCATION_PERCENTAGES,
    CHILD_PLAN_TIERS,
    calculate_financial_score,
    generate_child_recommendation,
    generate_financial_plan,
    round_half_up,
    select_tier,
)


def _request(child_age=5, monthly_budget=3000):
    return RecommendationRequest(
        child_age=child_age,
        monthly_budget=monthly_budget,
        goal="Education Fund",
        risk_tolerance="moderate",
    )


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected", [(2.5, 3), (3.5, 4), (-2.5, -2), (2.4999, 2), (0.0, 0)]
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestChildRecommendation:
    """Tests for tier selection and maturity projection."""

    def test_balanced_example(self):
        """Test a 5-year-old with ₹3,000/month lands in the Balanced tier."""
        recommendation = generate_child_recommendation(_request())
        assert recommendation.tier == "Balanced"
        assert recommendation.years_to_maturity == 13
        assert recommendation.total_investment == 468000
        assert recommendation.maturity_low == 1170000
        assert recommendation.maturity_high == 1638000
        assert [a.amount for a in recommendation.allocations] == [750, 750, 300, 1200]
        assert recommendation.fund_total == 1800
        assert recommendation.insurance_total == 1200

    @pytest.mark.parametrize(
        "budget,tier",
        [(500, "Starter"), (1999, "Starter"), (2000, "Balanced"), (4999, "Balanced"),
         (5000, "Premium"), (25000, "Premium")],
    )
    def test_tier_boundaries(self, budget, tier):
        assert select_tier(budget)[0] == tier

    def test_tier_weights_sum_to_one(self):
        for _upper, tier, funds, _multipliers in CHILD_PLAN_TIERS:
            assert sum(weight for _, weight, _ in funds) == pytest.approx(1.0), tier

    def test_starter_amounts_are_floored(self):
        recommendation = generate_child_recommendation(_request(monthly_budget=1001))
        assert [a.amount for a in recommendation.allocations] == [400, 300, 300]

    def test_premium_maturity(self):
        recommendation = generate_child_recommendation(_request(child_age=8, monthly_budget=10000))
        assert recommendation.total_investment == 1200000
        assert recommendation.maturity_low == 3840000
        assert recommendation.maturity_high == 5400000

    def test_age_at_maturity_gives_zero_horizon(self):
        recommendation = generate_child_recommendation(_request(child_age=18))
        assert recommendation.years_to_maturity == 0
        assert recommendation.total_investment == 0
        assert recommendation.maturity_high == 0

    def test_age_past_maturity_is_not_clamped(self):
        recommendation = generate_child_recommendation(_request(child_age=20))
        assert recommendation.years_to_maturity == -2
        assert recommendation.total_investment < 0


class TestFinancialPlan:
    """Tests for the general financial plan."""

    def test_moderate_example(self):
        profile = FinancialProfile(
            monthly_income=80000, monthly_expenses=45000, risk_tolerance="moderate"
        )
        plan = generate_financial_plan(profile)
        assert plan.surplus == 35000
        assert plan.allocations == {"emergency": 8750, "debt": 12250, "equity": 14000}
        assert plan.tax_saving_limit == pytest.approx(96000)
        assert plan.monthly_elss_sip == 8000
        assert plan.estimated_tax_savings == 29760
        assert plan.emergency_target == 270000
        assert plan.projected_wealth_lakhs == 47
        assert plan.fund_suggestions[0] == FUND_SUGGESTIONS["moderate"][0]

    def test_tax_saving_capped(self):
        profile = FinancialProfile(monthly_income=200000, monthly_expenses=50000)
        assert generate_financial_plan(profile).tax_saving_limit == 150000

    @pytest.mark.parametrize("risk", ["conservative", "moderate", "aggressive"])
    def test_allocation_percentages_sum_to_100(self, risk):
        assert sum(ALLOCATION_PERCENTAGES[risk].values()) == 100

    def test_conservative_allocations(self):
        profile = FinancialProfile(
            monthly_income=50000, monthly_expenses=30000, risk_tolerance="conservative"
        )
        plan = generate_financial_plan(profile)
        assert plan.allocations == {"emergency": 8000, "debt": 7000, "equity": 5000}
        assert plan.allocation_percentages == {"emergency": 40, "debt": 35, "equity": 25}

    def test_negative_surplus_passes_through(self):
        profile = FinancialProfile(monthly_income=30000, monthly_expenses=40000)
        plan = generate_financial_plan(profile)
        assert plan.surplus == -10000
        assert plan.allocations["equity"] == -4000

    def test_half_way_allocations_use_fractional_weights(self):
        """Test 35% of a ₹90 surplus rounds to 31, as 90 * 0.35 sits just under 31.5."""
        profile = FinancialProfile(
            monthly_income=190, monthly_expenses=100, risk_tolerance="moderate"
        )
        plan = generate_financial_plan(profile)
        assert plan.allocations == {"emergency": 23, "debt": 31, "equity": 36}
        assert plan.allocation_percentages == {"emergency": 25, "debt": 35, "equity": 40}


class TestFinancialScore:
    """Tests for the financial health score."""

    def test_empty_profile_scores_base(self):
        assert calculate_financial_score(FinancialProfile()) == 5.0

    def test_income_only(self):
        """Test income with matching expenses earns only the profile point."""
        profile = FinancialProfile(monthly_income=50000, monthly_expenses=50000)
        assert calculate_financial_score(profile) == 5.5

    def test_positive_surplus(self):
        profile = FinancialProfile(monthly_income=50000, monthly_expenses=45000)
        assert calculate_financial_score(profile) == 7.5

    def test_savings_rate_above_20_percent(self):
        profile = FinancialProfile(monthly_income=50000, monthly_expenses=30000)
        assert calculate_financial_score(profile) == 8.5

    def test_savings_rate_exactly_20_percent(self):
        profile = FinancialProfile(monthly_income=50000, monthly_expenses=40000)
        assert calculate_financial_score(profile) == 7.5

    def test_goals(self):
        profile = FinancialProfile(financial_goals=["Retirement Planning"])
        assert calculate_financial_score(profile) == 6.0

    @pytest.mark.parametrize("streak,expected", [(7, 5.0), (8, 5.5)])
    def test_streak_over_a_week(self, streak, expected):
        assert calculate_financial_score(FinancialProfile(), current_streak=streak) == expected

    def test_full_marks_capped_at_ten(self):
        profile = FinancialProfile(
            monthly_income=80000,
            monthly_expenses=20000,
            financial_goals=["Home Purchase"],
        )
        assert calculate_financial_score(profile, current_streak=30) == 10.0
