"""Static financial knowledge used by the advisor."""

from .catalog import FUND_SUGGESTIONS, LIC_PLANS, PORTFOLIO_TEMPLATES, SIP_TYPES, find_lic_plan
from .concepts import CONCEPTS, explain_concept

__all__ = [
    "CONCEPTS",
    "FUND_SUGGESTIONS",
    "LIC_PLANS",
    "PORTFOLIO_TEMPLATES",
    "SIP_TYPES",
    "explain_concept",
    "find_lic_plan",
]
