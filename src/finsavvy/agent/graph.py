"""LangGraph definition of one advisor turn."""

from langgraph.graph import END, StateGraph

from ..models import Intent
from ..tools.market_data import MarketDataProvider, SimulatedMarketData
from .nodes import (
    QUOTE_TOPICS,
    continue_profile_node,
    continue_recommendation_node,
    create_quote_node,
    explain_concept_node,
    fallback_node,
    investment_guidance_node,
    router_node,
    scheme_guidance_node,
    start_profile_node,
    start_recommendation_node,
    tax_guidance_node,
)
from .state import AdvisorState


def create_advisor_graph(market_data: MarketDataProvider | None = None):
    """Create the advisor graph.

    The router classifies the message and hands it to exactly one handler
    node. Quote-backed handlers without data loop back to the router, which
    then skips them.

    Args:
        market_data: Quote provider for gold, fund and market questions.
                     Defaults to the simulated provider.

    Returns:
        Compiled LangGraph graph.
    """
    if market_data is None:
        market_data = SimulatedMarketData()

    handlers = {
        Intent.CONTINUE_RECOMMENDATION_DIALOGUE: continue_recommendation_node,
        Intent.CONTINUE_PROFILE_DIALOGUE: continue_profile_node,
        Intent.EXPLAIN_CONCEPT: explain_concept_node,
        Intent.START_RECOMMENDATION_DIALOGUE: start_recommendation_node,
        Intent.START_PROFILE_DIALOGUE: start_profile_node,
        Intent.TAX_GUIDANCE: tax_guidance_node,
        Intent.INVESTMENT_GUIDANCE: investment_guidance_node,
        Intent.SCHEME_GUIDANCE: scheme_guidance_node,
        Intent.FALLBACK_MENU: fallback_node,
    }
    for intent in QUOTE_TOPICS:
        handlers[intent] = create_quote_node(market_data, intent)

    workflow = StateGraph(AdvisorState)

    workflow.add_node("router", router_node)
    for intent, node in handlers.items():
        workflow.add_node(intent.value, node)

    workflow.set_entry_point("router")

    def select_handler(state: AdvisorState) -> str:
        return state["intent"].value

    workflow.add_conditional_edges(
        "router",
        select_handler,
        {intent.value: intent.value for intent in handlers},
    )

    # Quote handlers without data re-route; everything else finishes the turn
    def should_reroute(state: AdvisorState) -> str:
        return "router" if state.get("response") is None else "end"

    for intent in handlers:
        if intent in QUOTE_TOPICS:
            workflow.add_conditional_edges(
                intent.value,
                should_reroute,
                {"router": "router", "end": END},
            )
        else:
            workflow.add_edge(intent.value, END)

    return workflow.compile()
