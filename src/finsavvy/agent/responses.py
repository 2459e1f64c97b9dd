"""Response templates for the advisor persona."""

from ..knowledge import LIC_PLANS, PORTFOLIO_TEMPLATES, SIP_TYPES, find_lic_plan
from ..models import ChildRecommendation, FinancialPlan, FinancialProfile, UserStreak
from ..streak import is_personal_record
from ..tools.calculators import round_half_up

DEFAULT_SUGGESTIONS = ["What is SIP?", "Compare LIC plans", "Live gold rates", "Investment plan"]
DIALOGUE_SUGGESTIONS = ["Need help with format", "Call support", "Skip this step"]
GREETING_SUGGESTIONS = [
    "What is SIP?",
    "Explain mutual funds",
    "Compare LIC child plans",
    "I need investment advice",
]
RETRY_SUGGESTIONS = ["Try again"]

DEFAULT_TAX_INCOME = 50000

SAVE_FAILED_RESPONSE = """I'm sorry, I couldn't save your answer just now, so nothing has been recorded yet.

Please send the same answer again in a moment and I'll pick up right where we left off."""

LOAD_FAILED_RESPONSE = """I'm sorry, I couldn't open your saved financial profile just now.

Please try again in a moment."""


def format_amount(value: float) -> str:
    """Format a rupee amount with thousands separators."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def greeting(streak: UserStreak, name: str | None = None) -> str:
    record = " New personal record!" if is_personal_record(streak) else ""
    salutation = f"Namaste {name}" if name else "Namaste"
    return f"""{salutation}! I'm Krishna, your personal financial guide.

**Your Streak: {streak.current_streak} days!**{record}

I can help you in two ways:
**Explain Finance Concepts** - Ask "What is SIP?" or "Explain mutual funds"
**Personalized Recommendations** - Share your details for custom LIC/SIP advice

What would you like to explore today?"""


# Profile collection

PROFILE_START = """**Let's Create Your Personalized Financial Roadmap!**

I'll ask a few questions to understand your situation and build an investment strategy with specific fund recommendations.

**First, your income:**

What's your monthly income? Include:
• Salary (in-hand amount)
• Bonus/incentives (monthly average)
• Other income sources

**Example:** "My monthly income is ₹75,000" or "I earn 1,20,000 per month"

*This helps me calculate your tax savings and investment capacity.*"""

INCOME_REPROMPT = """Please provide your monthly income in numbers.
**Example:** "My monthly income is ₹50,000" or "I earn 80000 per month\""""

EXPENSES_REPROMPT = """Please provide your total monthly expenses in numbers.
**Example:** "My monthly expenses are ₹30,000" or "I spend around 45000 monthly\""""


def expenses_prompt(income: float) -> str:
    return f"""Great! Monthly income: ₹{format_amount(income)}

Now, what are your monthly expenses? Include:
• Rent/EMI
• Food & Groceries
• Transportation
• Utilities & Bills
• Other expenses

**Example:** "My monthly expenses are around ₹35,000\""""


def goals_prompt(expenses: float, surplus: float) -> str:
    verdict = "Great saving potential!" if surplus > 0 else "Need to optimize expenses"
    return f"""Monthly expenses: ₹{format_amount(expenses)}
**Your monthly surplus: ₹{format_amount(surplus)}** {verdict}

What are your financial goals? Tell me about any of these:
1. **Home Purchase** - In how many years?
2. **Vehicle Purchase** - Budget and timeline?
3. **Child's Education** - Future planning?
4. **Retirement Planning** - Target age?
5. **Emergency Fund** - 6-12 months of expenses?

**Example:** "I want to buy a house in 5 years and plan for retirement\""""


def risk_prompt(goals: list[str]) -> str:
    identified = ", ".join(goals) if goals else "None yet, we can add them later"
    return f"""Goals identified: {identified}

What's your risk tolerance for investments?

**Conservative (Low Risk)**
• Prefer guaranteed returns
• Can accept 6-8% annual returns
• Priority: capital protection

**Moderate (Balanced Risk)**
• Mix of safety and growth
• Target: 10-12% annual returns
• Comfortable with some volatility

**Aggressive (High Risk)**
• Focus on maximum growth
• Target: 15%+ annual returns
• Can handle market fluctuations

**Example:** "I prefer moderate risk investments" or "I'm aggressive with my investments\""""


def format_financial_plan(plan: FinancialPlan) -> str:
    profile = plan.profile
    labels = {"emergency": "Emergency Fund", "debt": "Debt Funds", "equity": "Equity"}
    allocation_lines = "\n".join(
        f"• {labels[bucket]}: {plan.allocation_percentages[bucket]}% "
        f"(₹{format_amount(amount)}/month)"
        for bucket, amount in plan.allocations.items()
    )
    funds = "\n".join(f"• {name}" for name in plan.fund_suggestions)
    return f"""**Your Personalized Financial Plan is Ready!**

**Financial Summary:**
• Monthly Income: ₹{format_amount(profile.monthly_income)}
• Monthly Expenses: ₹{format_amount(profile.monthly_expenses)}
• Monthly Surplus: ₹{format_amount(plan.surplus)}
• Risk Profile: {profile.risk_tolerance.capitalize()}
• Emergency Fund Target: ₹{format_amount(plan.emergency_target)}

**Recommended Asset Allocation:**
{allocation_lines}

**Tax Saving Strategy:**
• Annual Tax Saving Potential: ₹{format_amount(plan.tax_saving_limit)}
• Monthly SIP in ELSS: ₹{format_amount(plan.monthly_elss_sip)}
• Estimated Tax Savings: ₹{format_amount(plan.estimated_tax_savings)}/year

**Specific Fund Recommendations:**
{funds}

**Projected Wealth in 10 Years:**
₹{plan.projected_wealth_lakhs:.1f} Lakhs

**Next Steps:**
1. Open investment accounts (Zerodha, Groww, or your bank)
2. Start SIPs in the recommended funds
3. Set up auto-debit for consistency
4. Review and rebalance quarterly

Would you like me to explain any specific investment or create a goal-based timeline?"""


# Recommendation collection

RECOMMENDATION_START = """**Child Investment Planning - Let's Create the Perfect Plan!**

I'll help you compare LIC child plans and SIP options for your situation.

**First, tell me your child's age.** It decides which plans fit and how long your money can grow.

**Examples:**
• "My daughter is 3 years old"
• "He is 7 years old"
• "She just turned 1"

**Why age matters:**
• **0-5 years:** Maximum time for wealth creation
• **6-12 years:** Focus on education planning
• **13-18 years:** Short-term, conservative approach

What's your child's current age?"""

CHILD_AGE_REPROMPT = "Please provide your child's age in years (e.g., '5 years old' or 'she is 8')"

BUDGET_REPROMPT = (
    "Please specify your monthly budget amount (e.g., '₹3000' or 'I can invest 5000 rupees monthly')"
)


def budget_prompt(child_age: int) -> str:
    return f"""**Child Age: {child_age} years recorded**

**What's your monthly investment budget?**

**Budget Categories:**
• **₹500-2,000:** Basic SIP plans, small premium LIC policies
• **₹2,000-5,000:** Balanced mix of SIP + LIC child plans
• **₹5,000-10,000:** Premium LIC plans + diversified SIP portfolio
• **₹10,000+:** Comprehensive wealth creation strategy

**Examples:**
• "I can invest ₹3,000 monthly"
• "My budget is around ₹1,500 per month"

What's your comfortable monthly investment amount?"""


def recommendation_goal_prompt(budget: int) -> str:
    return f"""**Monthly Budget: ₹{format_amount(budget)} recorded**

**What's your primary goal for this investment?**

**Goal Options:**
• **Education Fund:** College fees, professional courses
• **Marriage Fund:** Wedding expenses, gold, ceremonies
• **General Wealth:** Long-term wealth creation
• **Emergency + Education:** Dual purpose planning

What's your main investment goal?"""


def recommendation_risk_prompt(goal: str) -> str:
    return f"""**Goal: {goal} recorded**

**What's your risk tolerance?**

**Risk Levels:**
• **Conservative:** Guaranteed returns, capital protection (LIC focus)
• **Moderate:** Balanced growth with some risk (Mix of LIC + Equity SIP)
• **Aggressive:** Higher growth potential (Equity-heavy SIP focus)

**Examples:**
• "I prefer guaranteed returns, safety first"
• "Moderate risk is fine, balanced approach"

What's your risk preference?"""


def _allocation_lines(recommendation: ChildRecommendation, kind: str) -> str:
    return "\n".join(
        f"• **{a.name}:** ₹{format_amount(a.amount)}"
        for a in recommendation.allocations
        if a.kind == kind
    )


def _insurance_notes(recommendation: ChildRecommendation) -> str:
    if recommendation.tier == "Starter":
        plan = find_lic_plan("LIC Jeevan Tarun")
        return f"• **Benefits:** {plan.maturity_benefit}, life cover"
    if recommendation.tier == "Balanced":
        return "\n".join(
            f"• **{plan.name}:** {plan.suitability} ({plan.expected_return})"
            for plan in (find_lic_plan("LIC Kanyadan Policy"), find_lic_plan("LIC Jeevan Tarun"))
        )
    return "• **High premium LIC policy** with guaranteed additions\n• **Life cover:** 10x annual premium minimum"


def format_child_recommendation(recommendation: ChildRecommendation) -> str:
    request = recommendation.request
    budget = request.monthly_budget
    fund_weight = sum(a.weight for a in recommendation.allocations if a.kind == "fund")
    fund_share = round_half_up(fund_weight * 100)
    return f"""**Personalized Investment Plan**

**Your Profile:**
• Child Age: {request.child_age} years
• Investment Horizon: {recommendation.years_to_maturity} years
• Monthly Budget: ₹{format_amount(budget)}
• Goal: {request.goal}
• Risk Level: {request.risk_tolerance}
• Total Investment: ₹{format_amount(recommendation.total_investment)}

---

**{recommendation.tier.upper()} PLAN (Budget: ₹{format_amount(budget)})**

**SIP Portfolio ({fund_share}% allocation - ₹{format_amount(recommendation.fund_total)})**
{_allocation_lines(recommendation, "fund")}

**LIC Plan ({100 - fund_share}% allocation - ₹{format_amount(recommendation.insurance_total)})**
{_allocation_lines(recommendation, "insurance")}
{_insurance_notes(recommendation)}
• **Source:** licindia.in/insurance-plan

**Expected Maturity:** ₹{format_amount(recommendation.maturity_low)} - ₹{format_amount(recommendation.maturity_high)}

---

**Data Sources & Verification:**
• **LIC Plans:** licindia.in/insurance-plan (Official LIC website)
• **Mutual Funds:** amfiindia.com, respective fund house websites
• **Returns:** Historical data from AMFI, subject to market risks

*Mutual fund investments are subject to market risks. Past performance doesn't guarantee future returns. Please verify current plan details from official sources before investing.*

**Next Steps:**
1. Visit official websites to verify current rates
2. Consult a financial advisor for personalised advice
3. Start with smaller amounts and increase gradually
4. Review and rebalance annually

Would you like me to explain any specific plan in detail?"""


# Topical guidance


def gold_response(quote) -> str:
    trend = (
        "Bullish - Good time to buy" if quote.trend == "bullish" else "Bearish - Wait for better rates"
    )
    return f"""**Live Gold Rates (Updated: {quote.last_updated:%H:%M:%S}):**

**24K Gold:** ₹{format_amount(quote.price_24k)} per gram ({quote.change_percent:+.1f}%)
**22K Gold:** ₹{format_amount(quote.price_22k)} per gram
**Trend:** {trend}

**Source:** {quote.source}

**Krishna's Investment Strategy:**
• **Physical Gold:** 5-10% of portfolio maximum
• **Gold ETFs:** More liquid, lower making charges
• **Gold Bonds:** 2.5% annual interest + price appreciation
• **Digital Gold:** Start small, accumulate gradually

**Note:** Rates vary by city and jeweller. Always verify with local dealers before purchasing."""


def funds_response(snapshot) -> str:
    funds = "\n".join(
        f"""
**{index}. {fund.name}**
• **Returns:** {fund.returns} (3-year average)
• **Risk Level:** {fund.risk}
• **Min SIP:** {fund.min_sip}
• **AUM:** {fund.aum}
• **Source:** {fund.source}"""
        for index, fund in enumerate(snapshot.top_funds, start=1)
    )
    return f"""**Top Performing SIP Funds (Updated: {snapshot.last_updated:%H:%M:%S}):**
{funds}

**Disclaimer:** {snapshot.disclaimer}

**Krishna's SIP Strategy:**
• Start with ₹500-1000 monthly
• Diversify across 2-3 fund categories
• Increase your SIP by 10% every year
• Stay invested for at least 5 years

Would you like me to compare specific funds for your goals?"""


def market_response(snapshot, profile: FinancialProfile) -> str:
    gainers = "\n".join(f"• {gainer}" for gainer in snapshot.top_gainers) or "• Not available"
    sentiment = (
        "Bullish - Good for SIP investments"
        if snapshot.sentiment == "bullish"
        else "Bearish - Stay cautious"
    )
    personal = ""
    if profile.has_income():
        sip = round_half_up(profile.surplus * 0.4)
        personal = f"\n**Your Recommended Monthly SIP:** ₹{format_amount(sip)} across 3-4 funds\n"
    return f"""**Live Market Update ({snapshot.last_updated:%H:%M:%S}):**

**Nifty 50:** {format_amount(snapshot.nifty)} ({snapshot.nifty_change_percent:+.1f}%)
**Sensex:** {format_amount(snapshot.sensex)} ({snapshot.sensex_change_percent:+.1f}%)

**Today's Top Performers:**
{gainers}

**Market Sentiment:** {sentiment}

**Investment Strategy for Current Market:**
• **SIP in Index Funds:** Benefit from market growth
• **Large Cap Funds:** Stable performance in volatile times
• **Avoid lump sum:** Continue systematic investing
{personal}
Ready to start your investment journey?"""


def tax_bracket(annual_income: float) -> int:
    if annual_income <= 250000:
        return 0
    if annual_income <= 500000:
        return 5
    if annual_income <= 1000000:
        return 20
    return 30


def tax_response(profile: FinancialProfile) -> str:
    income = profile.monthly_income or DEFAULT_TAX_INCOME
    annual = income * 12
    bracket = tax_bracket(annual)
    if profile.has_income():
        elss = min(12500, round_half_up(profile.monthly_income * 0.15))
        savings = round_half_up(min(150000, profile.monthly_income * 12 * 0.15) * bracket / 100)
        personal = f"""**Your Recommended Tax-Saving Portfolio:**
Monthly ELSS SIP: ₹{format_amount(elss)}
Annual Tax Savings: ₹{format_amount(savings)}"""
    else:
        personal = "Share your income for exact tax-saving calculations!"
    return f"""**Personalized Tax Optimization Strategy:**

**Your Tax Profile:**
• Annual Income: ₹{format_amount(annual)}
• Current Tax Bracket: {bracket}%
• Potential Tax Savings: ₹{format_amount(round_half_up(annual * 0.31 * 0.15))}/year

**Section 80C Investments (₹1.5L limit):**
• **ELSS Mutual Funds:** ₹12,500/month - tax saving + 12-15% returns, 3-year lock-in
• **PPF:** ₹12,500/month - 15-year lock-in, 7.1% tax-free returns
• **NSC/Tax Saver FD:** ₹5,000/month - 5-year lock-in, guaranteed returns

**Additional Tax Benefits:**
• **Section 80D:** Health insurance (₹25K-₹50K deduction)
• **Section 80CCD(1B):** NPS additional ₹50K
• **Section 24:** Home loan interest (₹2L deduction)

{personal}

Ready to start your tax-saving investments?"""


def investment_response(profile: FinancialProfile) -> str:
    title, lines, expected = PORTFOLIO_TEMPLATES[profile.risk_tolerance]
    portfolio = "\n".join(f"• {line}" for line in lines)
    sip_types = "\n".join(
        f"• **{sip.name}** ({sip.risk_level} risk): {sip.expected_return}, from {sip.min_investment}"
        for sip in SIP_TYPES
    )
    if profile.monthly_expenses > 0:
        emergency_target = f"₹{format_amount(profile.monthly_expenses * 6)}"
    else:
        emergency_target = "6 months of expenses"
    if profile.has_income():
        emergency_share = f"₹{format_amount(round_half_up(profile.surplus * 0.25))}"
        total_sip = profile.surplus * 0.6
        wealth = round_half_up(total_sip * 12 * 10 * 1.12 / 100000)
        sip_plan = f"""• Total Monthly SIP: ₹{format_amount(round_half_up(total_sip))}
• Start with: ₹5,000/month, increase 10% annually
• Wealth in 10 years: ₹{wealth:.1f} Lakhs"""
    else:
        emergency_share = "25% of surplus"
        sip_plan = "Share your income for personalized SIP amounts!"
    return f"""**Personalized Investment Strategy:**

**Emergency Fund (First Priority):**
• Target: {emergency_target}
• Investment: Liquid funds, savings account
• Monthly allocation: {emergency_share}

**Wealth Creation Portfolio - {title}:**
{portfolio}
Expected Returns: {expected}

**SIP Categories:**
{sip_types}

**SIP Recommendations:**
{sip_plan}

**Getting Started:**
1. Download the Groww or Zerodha Coin app
2. Complete KYC verification
3. Start SIPs in the recommended funds
4. Set up auto-debit for consistency

Want me to create a step-by-step investment timeline?"""


def scheme_response(profile: FinancialProfile) -> str:
    ssy = LIC_PLANS[0]
    personal = ""
    if profile.has_income():
        income = profile.monthly_income
        personal = f"""
**For your income (₹{format_amount(income)}/month):**
• ELSS SIP: ₹{format_amount(round_half_up(income * 0.1))}/month
• PPF: ₹{format_amount(round_half_up(income * 0.08))}/month
• NPS: ₹{format_amount(round_half_up(income * 0.05))}/month
"""
    return f"""**Government Investment Schemes - Detailed Guide:**

**Public Provident Fund (PPF):**
• **Lock-in:** 15 years (extendable in 5-year blocks)
• **Interest:** 7.1% annually (tax-free)
• **Investment:** ₹500 to ₹1.5L per year
• **Tax Benefit:** EEE (Exempt-Exempt-Exempt)

**National Pension System (NPS):**
• **Lock-in:** Until age 60 (partial withdrawal allowed)
• **Returns:** 10-12% historically
• **Tax Benefit:** ₹1.5L under Section 80C + ₹50K under Section 80CCD(1B)

**{ssy.name} (Girl Child):**
• **Eligibility:** {ssy.eligibility}
• **Maturity:** {ssy.maturity_benefit}
• **Interest:** {ssy.expected_return}
• **Investment:** {ssy.premium_range}

| Feature | ELSS | PPF | NPS |
|---------|------|-----|-----|
| Lock-in | 3 years | 15 years | Till 60 |
| Returns | 12-15% | 7.1% | 10-12% |
| Tax on maturity | LTCG | Nil | Partial |
| Liquidity | High | Medium | Low |

**Krishna's Recommendation:**
• **Age 20-30:** 70% ELSS + 30% PPF
• **Age 30-40:** 50% ELSS + 30% PPF + 20% NPS
• **Age 40+:** 40% ELSS + 40% PPF + 20% NPS
{personal}
Which scheme interests you the most?"""


def fallback_response(profile: FinancialProfile) -> str:
    if profile.has_income():
        journey = (
            "Profile Complete - Ready for advanced strategies!\n"
            f"Current surplus: ₹{format_amount(profile.surplus)}/month"
        )
    else:
        journey = "Let's start by creating your financial profile or explaining concepts!"
    return f"""**Namaste! I'm Krishna, your financial advisor with two special modes:**

**Concept Explanation Mode:**
Ask "What is SIP?" or "Explain mutual funds" for clear, beginner-friendly explanations.

**Personalized Recommendation Mode:**
Share your details (age, budget, goals) for custom LIC child plans and SIP comparisons.

**I can also help you with:**
• **Market data:** Gold rates, fund performance, market updates
• **Tax optimization:** Save thousands through smart investments
• **Government schemes:** PPF, NPS, ELSS guidance
• **Goal-based investing:** Home, retirement, education planning

**Try asking:**
• "What is SIP?"
• "Compare LIC child plans"
• "Current gold rates for investment"
• "My income is ₹80K, create my plan"

**Your Financial Journey:**
{journey}

What would you like to explore today?"""
