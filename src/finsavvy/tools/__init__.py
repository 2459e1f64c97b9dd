"""Calculators and market data used by the advisor."""

from .calculators import generate_child_recommendation, generate_financial_plan
from .market_data import (
    MarketDataProvider,
    SimulatedMarketData,
    YFinanceMarketData,
    create_market_data,
)

__all__ = [
    "generate_child_recommendation",
    "generate_financial_plan",
    "MarketDataProvider",
    "SimulatedMarketData",
    "YFinanceMarketData",
    "create_market_data",
]
