"""Node functions for the advisor graph."""

import logging

from ..knowledge import explain_concept
from ..models import Intent
from ..tools.calculators import generate_child_recommendation, generate_financial_plan
from ..tools.market_data import MarketDataProvider, QuoteTopic
from . import responses
from .dialogues import (
    handle_profile_step,
    handle_recommendation_step,
    start_profile_dialogue,
    start_recommendation_dialogue,
)
from .router import RouterContext, route
from .state import AdvisorState

logger = logging.getLogger(__name__)

QUOTE_TOPICS: dict[Intent, QuoteTopic] = {
    Intent.GOLD_RATE_QUERY: "gold",
    Intent.FUND_PERFORMANCE_QUERY: "funds",
    Intent.MARKET_QUERY: "market",
}


def router_node(state: AdvisorState) -> dict:
    """Classify the message; arm a dialogue in the same update when one starts."""
    context = RouterContext(
        recommendation_active=state["recommendation_dialogue"].active,
        profile_active=state["profile_dialogue"].active,
        has_income=state["profile"].has_income(),
    )
    intent = route(state["message"], context, skip=state.get("skipped_intents") or [])
    logger.info("Routed message to %s", intent.value)

    update: dict = {"intent": intent}
    if intent is Intent.START_RECOMMENDATION_DIALOGUE:
        update["recommendation_dialogue"] = start_recommendation_dialogue()
    elif intent is Intent.START_PROFILE_DIALOGUE:
        update["profile_dialogue"] = start_profile_dialogue()
    return update


def continue_profile_node(state: AdvisorState) -> dict:
    outcome = handle_profile_step(state["profile_dialogue"], state["message"])
    update: dict = {"profile_dialogue": outcome.dialogue, "response": outcome.response}

    if outcome.completed is not None:
        profile = outcome.completed.apply_to(state["profile"])
        plan = generate_financial_plan(profile)
        update.update(
            profile=profile,
            completed_profile=profile,
            response=responses.format_financial_plan(plan),
        )
    return update


def continue_recommendation_node(state: AdvisorState) -> dict:
    outcome = handle_recommendation_step(state["recommendation_dialogue"], state["message"])
    update: dict = {"recommendation_dialogue": outcome.dialogue, "response": outcome.response}

    if outcome.completed is not None:
        recommendation = generate_child_recommendation(outcome.completed)
        logger.info(
            "Generated %s child plan over %d years",
            recommendation.tier,
            recommendation.years_to_maturity,
        )
        update["response"] = responses.format_child_recommendation(recommendation)
    return update


def explain_concept_node(state: AdvisorState) -> dict:
    return {"response": explain_concept(state["message"])}


def start_recommendation_node(state: AdvisorState) -> dict:
    return {"response": responses.RECOMMENDATION_START}


def start_profile_node(state: AdvisorState) -> dict:
    return {"response": responses.PROFILE_START}


def create_quote_node(market_data: MarketDataProvider, intent: Intent):
    """Create a node answering from a market quote.

    With no quote available the node leaves ``response`` empty and records the
    intent as skipped, so the graph re-routes the message to the next rule.
    """
    topic = QUOTE_TOPICS[intent]

    def quote_node(state: AdvisorState) -> dict:
        quote = market_data.fetch_quote(topic)
        if quote is None:
            logger.info("No %s quote available, falling through", topic)
            skipped = list(state.get("skipped_intents") or [])
            return {"response": None, "skipped_intents": skipped + [intent]}

        if topic == "gold":
            return {"response": responses.gold_response(quote)}
        if topic == "funds":
            return {"response": responses.funds_response(quote)}
        return {"response": responses.market_response(quote, state["profile"])}

    return quote_node


def tax_guidance_node(state: AdvisorState) -> dict:
    return {"response": responses.tax_response(state["profile"])}


def investment_guidance_node(state: AdvisorState) -> dict:
    return {"response": responses.investment_response(state["profile"])}


def scheme_guidance_node(state: AdvisorState) -> dict:
    return {"response": responses.scheme_response(state["profile"])}


def fallback_node(state: AdvisorState) -> dict:
    return {"response": responses.fallback_response(state["profile"])}
