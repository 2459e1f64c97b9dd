"""Dialogue engine for the financial advisor."""

from .engine import AdvisorEngine
from .graph import create_advisor_graph

__all__ = ["AdvisorEngine", "create_advisor_graph"]
