"""Static product tables: LIC plans, SIP categories and fund suggestions."""

from typing import Literal

from pydantic import BaseModel

from ..models import RiskTolerance


class LICPlan(BaseModel):
    name: str
    eligibility: str
    premium_range: str
    maturity_benefit: str
    expected_return: str
    suitability: str


class SIPType(BaseModel):
    name: str
    risk_level: Literal["Low", "Medium", "High"]
    expected_return: str
    min_investment: str
    suitability: str


LIC_PLANS: list[LICPlan] = [
    LICPlan(
        name="Sukanya Samriddhi Yojana",
        eligibility="Girl child below 10 years",
        premium_range="₹250 to ₹1.5L per year",
        maturity_benefit="Tax-free maturity at 21 years or marriage after 18",
        expected_return="7.6% annually (tax-free)",
        suitability="Best for girl child's education and marriage expenses",
    ),
    LICPlan(
        name="LIC Jeevan Tarun",
        eligibility="Age 90 days to 12 years",
        premium_range="₹6,000 to ₹3L annually",
        maturity_benefit="Guaranteed returns + bonus at age 25",
        expected_return="6-8% annually",
        suitability="Child's higher education and career start",
    ),
    LICPlan(
        name="LIC Kanyadan Policy",
        eligibility="Girl child 1 day to 20 years",
        premium_range="₹12,000 to ₹2L annually",
        maturity_benefit="Lump sum at marriage or age 25",
        expected_return="5-7% annually",
        suitability="Marriage expenses and financial security",
    ),
    LICPlan(
        name="LIC Jeevan Lakshya",
        eligibility="Age 18-50 years",
        premium_range="₹15,000 to ₹10L annually",
        maturity_benefit="Income + lump sum for 10 years",
        expected_return="6-9% annually",
        suitability="Family income protection and wealth creation",
    ),
]

SIP_TYPES: list[SIPType] = [
    SIPType(
        name="Equity SIP",
        risk_level="High",
        expected_return="12-15% annually",
        min_investment="₹500/month",
        suitability="Long-term wealth creation, 5+ years",
    ),
    SIPType(
        name="Balanced/Hybrid SIP",
        risk_level="Medium",
        expected_return="9-12% annually",
        min_investment="₹1,000/month",
        suitability="Moderate risk investors, 3-5 years",
    ),
    SIPType(
        name="Debt SIP",
        risk_level="Low",
        expected_return="6-8% annually",
        min_investment="₹1,000/month",
        suitability="Conservative investors, capital protection",
    ),
    SIPType(
        name="ELSS SIP",
        risk_level="Medium",
        expected_return="10-14% annually",
        min_investment="₹500/month",
        suitability="Tax saving with growth, 3-year lock-in",
    ),
]

FUND_SUGGESTIONS: dict[RiskTolerance, list[str]] = {
    "conservative": [
        "SBI Conservative Hybrid Fund",
        "ICICI Prudential Corporate Bond Fund",
        "Axis Treasury Advantage Fund",
    ],
    "moderate": [
        "Axis Bluechip Fund (Large Cap)",
        "HDFC Balanced Advantage Fund",
        "Mirae Asset Tax Saver Fund (ELSS)",
    ],
    "aggressive": [
        "Parag Parikh Flexi Cap Fund",
        "Axis Small Cap Fund",
        "Mirae Asset Emerging Bluechip Fund",
    ],
}

# Wealth-creation portfolio shown by the generic investment guidance.
PORTFOLIO_TEMPLATES: dict[RiskTolerance, tuple[str, list[str], str]] = {
    "conservative": (
        "Conservative Approach",
        [
            "Large Cap Funds: 60% - Axis Bluechip Fund",
            "Debt Funds: 30% - ICICI Corporate Bond Fund",
            "Gold ETF: 10% - SBI Gold ETF",
        ],
        "8-10% annually",
    ),
    "moderate": (
        "Balanced Portfolio",
        [
            "Large Cap: 40% - Axis Bluechip Fund",
            "Mid Cap: 30% - HDFC Mid-Cap Opportunities",
            "Flexi Cap: 20% - Parag Parikh Flexi Cap",
            "Debt: 10% - Axis Treasury Advantage",
        ],
        "12-15% annually",
    ),
    "aggressive": (
        "Aggressive Growth",
        [
            "Small/Mid Cap: 40% - Axis Small Cap Fund",
            "Flexi Cap: 35% - Parag Parikh Flexi Cap",
            "Large Cap: 25% - Mirae Asset Large Cap",
        ],
        "15-18% annually",
    ),
}


def find_lic_plan(name: str) -> LICPlan | None:
    """Look up an LIC plan by (case-insensitive) name."""
    for plan in LIC_PLANS:
        if plan.name.lower() == name.lower():
            return plan
    return None
