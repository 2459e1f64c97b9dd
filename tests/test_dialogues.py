"""Tests for the slot-filling dialogues."""

import pytest

from src.finsavvy.agent import responses
from src.finsavvy.agent.dialogues import (
    ProfileAnswers,
    ProfileDialogue,
    ProfileStep,
    RecommendationDialogue,
    RecommendationStep,
    classify_risk,
    detect_goals,
    extract_amount,
    extract_budget,
    extract_integer,
    handle_profile_step,
    handle_recommendation_step,
    start_profile_dialogue,
    start_recommendation_dialogue,
)
from src.finsavvy.models import FinancialProfile, RecommendationRequest


class TestParsers:
    """Tests for free-text slot extraction."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("My monthly income is ₹75,000", 75000.0),
            ("I earn 1,20,000 per month", 120000.0),
            ("about 45000.50", 45000.5),
            ("0", 0.0),
            ("no idea", None),
        ],
    )
    def test_extract_amount(self, text, expected):
        assert extract_amount(text) == expected

    def test_extract_integer(self):
        assert extract_integer("My daughter is 3 years old") == 3
        assert extract_integer("she just turned one") is None

    def test_extract_budget(self):
        assert extract_budget("I can invest ₹3,000 monthly") == 3000
        assert extract_budget("5000 rupees") == 5000
        assert extract_budget("not sure") is None

    def test_detect_goals(self):
        """Test goals are reported in table order without duplicates."""
        assert detect_goals("Retirement, a new car and a home") == [
            "Home Purchase",
            "Vehicle Purchase",
            "Retirement Planning",
        ]
        assert detect_goals("nothing specific") == []

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("I prefer safe investments", "conservative"),
            ("Go for growth", "aggressive"),
            ("moderate please", "moderate"),
            ("whatever works", "moderate"),
            ("low to high", "conservative"),
        ],
    )
    def test_classify_risk(self, text, expected):
        assert classify_risk(text) == expected


class TestProfileDialogue:
    """Tests for the income -> expenses -> goals -> risk sequence."""

    def test_income_reprompts_without_number(self):
        dialogue = start_profile_dialogue()
        outcome = handle_profile_step(dialogue, "a decent amount")
        assert outcome.response == responses.INCOME_REPROMPT
        assert outcome.dialogue == dialogue
        assert not outcome.advanced

    def test_income_reprompts_on_zero(self):
        outcome = handle_profile_step(start_profile_dialogue(), "0")
        assert outcome.response == responses.INCOME_REPROMPT
        assert outcome.dialogue.current_step is ProfileStep.INCOME

    def test_income_advances(self):
        outcome = handle_profile_step(start_profile_dialogue(), "₹80,000")
        assert outcome.advanced
        assert outcome.dialogue.current_step is ProfileStep.EXPENSES
        assert outcome.dialogue.collected.monthly_income == 80000
        assert "Monthly income: ₹80,000" in outcome.response

    def test_expenses_reprompts_without_number(self):
        dialogue = start_profile_dialogue().advance(ProfileStep.EXPENSES, monthly_income=80000)
        outcome = handle_profile_step(dialogue, "a lot")
        assert outcome.response == responses.EXPENSES_REPROMPT
        assert outcome.dialogue is dialogue

    def test_zero_expenses_accepted(self):
        dialogue = start_profile_dialogue().advance(ProfileStep.EXPENSES, monthly_income=80000)
        outcome = handle_profile_step(dialogue, "0")
        assert outcome.dialogue.current_step is ProfileStep.GOALS
        assert "Your monthly surplus: ₹80,000" in outcome.response

    def test_negative_surplus_message(self):
        dialogue = start_profile_dialogue().advance(ProfileStep.EXPENSES, monthly_income=30000)
        outcome = handle_profile_step(dialogue, "40000")
        assert "Need to optimize expenses" in outcome.response

    def test_goals_always_advance(self):
        dialogue = start_profile_dialogue().advance(ProfileStep.GOALS)
        outcome = handle_profile_step(dialogue, "not sure yet")
        assert outcome.dialogue.current_step is ProfileStep.RISK
        assert outcome.dialogue.collected.financial_goals == []
        assert "None yet" in outcome.response

    def test_risk_completes_and_resets(self):
        """Test the terminal step hands back the answers and an inactive dialogue."""
        dialogue = start_profile_dialogue().advance(
            ProfileStep.RISK,
            monthly_income=80000,
            monthly_expenses=45000,
            financial_goals=["Home Purchase"],
        )
        outcome = handle_profile_step(dialogue, "aggressive")
        assert outcome.response is None
        assert outcome.dialogue == ProfileDialogue()
        assert outcome.completed == ProfileAnswers(
            monthly_income=80000,
            monthly_expenses=45000,
            financial_goals=["Home Purchase"],
            risk_tolerance="aggressive",
        )

    def test_inactive_dialogue_restarts(self):
        outcome = handle_profile_step(ProfileDialogue(), "80000")
        assert outcome.dialogue.active
        assert outcome.dialogue.current_step is ProfileStep.INCOME
        assert outcome.response == responses.PROFILE_START

    def test_answers_merge_into_profile(self):
        """Test applying answers keeps fields the dialogue does not collect."""
        profile = FinancialProfile(age=40, dependents=2, monthly_income=10000)
        answers = ProfileAnswers(monthly_income=90000, risk_tolerance="conservative")
        merged = answers.apply_to(profile)
        assert merged.monthly_income == 90000
        assert merged.risk_tolerance == "conservative"
        assert merged.age == 40
        assert merged.dependents == 2


class TestRecommendationDialogue:
    """Tests for the child age -> budget -> goal -> risk sequence."""

    def test_age_reprompts(self):
        dialogue = start_recommendation_dialogue()
        outcome = handle_recommendation_step(dialogue, "What is SIP?")
        assert outcome.response == responses.CHILD_AGE_REPROMPT
        assert outcome.dialogue is dialogue

    def test_age_advances(self):
        outcome = handle_recommendation_step(start_recommendation_dialogue(), "She is 5 years old")
        assert outcome.dialogue.current_step is RecommendationStep.BUDGET
        assert outcome.dialogue.collected.child_age == 5
        assert "Child Age: 5 years recorded" in outcome.response

    def test_budget_reprompts(self):
        dialogue = start_recommendation_dialogue().advance(RecommendationStep.BUDGET, child_age=5)
        outcome = handle_recommendation_step(dialogue, "not much")
        assert outcome.response == responses.BUDGET_REPROMPT

    def test_budget_advances(self):
        dialogue = start_recommendation_dialogue().advance(RecommendationStep.BUDGET, child_age=5)
        outcome = handle_recommendation_step(dialogue, "₹3,000 monthly")
        assert outcome.dialogue.current_step is RecommendationStep.GOAL
        assert outcome.dialogue.collected.monthly_budget == 3000

    def test_goal_is_free_text(self):
        dialogue = start_recommendation_dialogue().advance(
            RecommendationStep.GOAL, child_age=5, monthly_budget=3000
        )
        outcome = handle_recommendation_step(dialogue, "Education Fund")
        assert outcome.dialogue.current_step is RecommendationStep.RISK
        assert "Goal: Education Fund recorded" in outcome.response

    def test_risk_completes(self):
        dialogue = start_recommendation_dialogue().advance(
            RecommendationStep.RISK, child_age=5, monthly_budget=3000, goal="Education Fund"
        )
        outcome = handle_recommendation_step(dialogue, "Moderate")
        assert outcome.response is None
        assert outcome.dialogue == RecommendationDialogue()
        assert outcome.completed == RecommendationRequest(
            child_age=5, monthly_budget=3000, goal="Education Fund", risk_tolerance="Moderate"
        )
