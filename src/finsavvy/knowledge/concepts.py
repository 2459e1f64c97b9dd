"""Beginner-friendly explanations of common Indian personal-finance concepts."""

SIP_EXPLANATION = """**SIP (Systematic Investment Plan) Explained:**

A SIP is a monthly savings habit, except the money goes into a mutual fund instead of a piggy bank. You invest a fixed amount (say ₹1,000) every month, automatically.

**Simple Example:** Invest ₹2,000 monthly in an equity SIP for 10 years at 12% returns. You put in ₹2.4 lakhs and end up with around ₹4.6 lakhs. That is compounding at work.

**Why SIP Works:**
• **Rupee Cost Averaging** - more units when prices are low, fewer when high
• **Discipline** - automatic investing keeps emotions out
• **Flexibility** - start with ₹500, increase any time
• **Compounding** - your returns earn returns too

**Best for:** Regular earners who want to build wealth steadily without timing the market."""

MUTUAL_FUND_EXPLANATION = """**Mutual Funds Made Simple:**

A mutual fund is a big basket where many people pool their money. A professional fund manager uses the pool to buy stocks, bonds or other securities.

**Real Example:** 1,000 people contribute ₹10,000 each, making a ₹1 crore pool. The manager buys shares of 50 companies. As those companies grow, everyone's units grow in proportion.

**Types:**
• **Equity Funds** - invest in stocks (higher risk, higher returns)
• **Debt Funds** - invest in bonds (lower risk, steady returns)
• **Hybrid Funds** - a mix of both

**Benefits:** Professional management, diversification, liquidity, and a ₹500 minimum.

**Perfect for:** Anyone who wants market exposure without picking individual stocks."""

LIC_EXPLANATION = """**LIC (Life Insurance Corporation) Explained:**

LIC is India's largest life insurer. Its traditional plans combine insurance cover with a savings component that grows over time.

**How it Works:** You pay a premium (monthly or yearly). LIC pays a larger amount after a fixed term, or to your family if something happens to you during the term.

**Example:** Pay ₹10,000 a year for 15 years in LIC Jeevan Anand. At maturity you receive ₹3-4 lakhs, and your family is covered for ₹5 lakhs during the term.

**Popular LIC Plans:**
• **Jeevan Anand** - life cover plus returns
• **Jeevan Akshay** - pension plan
• **Kanyadan** - for a girl child

**Good for:** Risk-averse savers who want guaranteed returns together with life cover."""

ELSS_EXPLANATION = """**ELSS (Equity Linked Savings Scheme) Explained:**

ELSS is a mutual fund that cuts your tax bill while your money grows.

**Tax Benefit:** Up to ₹1.5 lakhs invested in ELSS is deductible under Section 80C. In the 30% bracket that saves up to ₹45,000 in tax.

**Example:** ₹12,500 monthly for 3 years (the minimum lock-in) is ₹4.5 lakhs invested, which could grow to ₹6-7 lakhs, plus ₹1.35 lakhs saved in tax.

**Key Features:**
• 3-year lock-in, the shortest among tax-saving options
• Potential returns of 12-15% a year
• Long-term gains taxed only above the annual exemption

**Perfect for:** Salaried investors who want tax savings and growth with a short commitment."""

PPF_EXPLANATION = """**PPF (Public Provident Fund) Explained:**

PPF is a government-backed account that grows your money safely over 15 years, with full tax exemption.

**Triple Tax Benefit (EEE):**
• Contributions are deductible (up to ₹1.5L)
• Interest is tax-free
• Maturity amount is tax-free

**Example:** ₹1.5 lakhs a year for 15 years at 7.1%. You invest ₹22.5 lakhs and receive over ₹40 lakhs, entirely tax-free.

**Features:**
• 15-year lock-in, extendable in 5-year blocks
• Partial withdrawal after 7 years
• Loan facility available
• Government-guaranteed returns

**Best for:** Conservative, long-term savers and retirement planning."""

NPS_EXPLANATION = """**NPS (National Pension System) Explained:**

NPS is a market-linked retirement account managed by professional fund managers, built to pay you a regular income after 60.

**How it Works:** You contribute regularly and choose an equity/debt mix. At 60 you take part of the corpus as a lump sum and the rest buys a lifelong pension.

**Example:** ₹5,000 a month from age 30 to 60 at 10% average returns turns ₹18 lakhs of contributions into more than ₹1 crore.

**Tax Benefits:**
• ₹1.5L deduction under Section 80C
• Additional ₹50K under Section 80CCD(1B)
• Partly tax-free withdrawal at maturity

**Best for:** Young professionals building a large retirement corpus with extra tax benefits."""

UNKNOWN_CONCEPT_RESPONSE = """I'd love to explain that! I specialise in common financial terms like:

**Ask me about:**
• SIP, Mutual Funds, ELSS
• LIC, PPF, NPS
• Tax saving investments
• Child investment plans
• Retirement planning

**Try asking:** "What is SIP?" or "Explain mutual funds" for a clear, beginner-friendly explanation with examples.

Which financial concept would you like me to explain?"""

# Order matters: the first key found in the message wins.
CONCEPTS: list[tuple[str, str]] = [
    ("sip", SIP_EXPLANATION),
    ("mutual fund", MUTUAL_FUND_EXPLANATION),
    ("lic", LIC_EXPLANATION),
    ("elss", ELSS_EXPLANATION),
    ("ppf", PPF_EXPLANATION),
    ("nps", NPS_EXPLANATION),
]


def explain_concept(text: str) -> str:
    """Return the canned explanation for the first concept mentioned in ``text``.

    Matching is a case-insensitive substring check against ``CONCEPTS`` in
    order, so "explain sip vs mutual fund" explains SIP.
    """
    lowered = text.lower()
    for key, explanation in CONCEPTS:
        if key in lowered:
            return explanation
    return UNKNOWN_CONCEPT_RESPONSE
