"""Market quotes for gold, mutual funds and Indian indices.

Two providers implement ``MarketDataProvider``: ``SimulatedMarketData`` serves
fixed reference figures, ``YFinanceMarketData`` reads live prices from Yahoo
Finance. Providers return ``None`` when they have nothing for a topic; callers
treat that as "no quote" and fall back to general guidance.
"""

import logging
from datetime import datetime
from typing import Literal, Protocol

import yfinance as yf
from pydantic import BaseModel

logger = logging.getLogger(__name__)

QuoteTopic = Literal["gold", "funds", "market"]

TROY_OUNCE_GRAMS = 31.1035
GOLD_FUTURES_SYMBOL = "GC=F"
USD_INR_SYMBOL = "INR=X"
NIFTY_SYMBOL = "^NSEI"
SENSEX_SYMBOL = "^BSESN"


class GoldQuote(BaseModel):
    price_24k: float
    price_22k: float
    change_percent: float
    trend: Literal["bullish", "bearish"]
    source: str
    last_updated: datetime


class FundQuote(BaseModel):
    name: str
    returns: str
    risk: str
    min_sip: str
    aum: str
    source: str


class FundsSnapshot(BaseModel):
    top_funds: list[FundQuote]
    disclaimer: str
    last_updated: datetime


class MarketSnapshot(BaseModel):
    nifty: float
    nifty_change_percent: float
    sensex: float
    sensex_change_percent: float
    top_gainers: list[str]
    sentiment: Literal["bullish", "bearish"]
    last_updated: datetime


QuoteSnapshot = GoldQuote | FundsSnapshot | MarketSnapshot


class MarketDataProvider(Protocol):
    def fetch_quote(self, topic: QuoteTopic) -> QuoteSnapshot | None: ...


def _trend(change_percent: float) -> Literal["bullish", "bearish"]:
    return "bullish" if change_percent >= 0 else "bearish"


class SimulatedMarketData:
    """Fixed reference quotes, stamped with the time of the request."""

    def __init__(self, clock=datetime.now):
        self._clock = clock

    def fetch_quote(self, topic: QuoteTopic) -> QuoteSnapshot | None:
        now = self._clock()
        if topic == "gold":
            return GoldQuote(
                price_24k=6247,
                price_22k=5726,
                change_percent=0.8,
                trend="bullish",
                source="IBJA (India Bullion & Jewellers Association) - RBI Approved Rates",
                last_updated=now,
            )
        if topic == "funds":
            return FundsSnapshot(
                top_funds=[
                    FundQuote(
                        name="Axis Bluechip Fund",
                        returns="12.8%",
                        risk="Low",
                        min_sip="₹500",
                        aum="₹45,000 Cr",
                        source="axismf.com",
                    ),
                    FundQuote(
                        name="Mirae Asset Emerging Bluechip",
                        returns="15.2%",
                        risk="Medium",
                        min_sip="₹1,000",
                        aum="₹28,500 Cr",
                        source="miraeassetmf.co.in",
                    ),
                    FundQuote(
                        name="Parag Parikh Flexi Cap",
                        returns="14.6%",
                        risk="Medium",
                        min_sip="₹1,000",
                        aum="₹35,200 Cr",
                        source="ppfas.com",
                    ),
                ],
                disclaimer="Returns are past performance. Data from AMFI and respective fund houses.",
                last_updated=now,
            )
        if topic == "market":
            return MarketSnapshot(
                nifty=21456.78,
                nifty_change_percent=1.2,
                sensex=70892.45,
                sensex_change_percent=0.9,
                top_gainers=["TCS (+2.1%)", "Infosys (+1.8%)", "HDFC Bank (+1.5%)"],
                sentiment="bullish",
                last_updated=now,
            )
        return None


class YFinanceMarketData:
    """Live quotes from Yahoo Finance.

    Gold is derived from COMEX futures (USD per troy ounce) converted to INR
    per gram. Yahoo has no AMFI fund rankings, so ``funds`` is not served.
    """

    def __init__(self, clock=datetime.now):
        self._clock = clock

    def fetch_quote(self, topic: QuoteTopic) -> QuoteSnapshot | None:
        try:
            if topic == "gold":
                return self._gold()
            if topic == "market":
                return self._market()
        except Exception as e:
            logger.warning("Market data fetch failed for %s: %s", topic, e)
        return None

    @staticmethod
    def _last_close(symbol: str) -> tuple[float, float]:
        """Return (last close, percent change over the period) for ``symbol``."""
        history = yf.Ticker(symbol).history(period="5d")
        if len(history) == 0:
            raise ValueError(f"No price history for {symbol}")
        closes = history["Close"]
        last = float(closes.iloc[-1])
        previous = float(closes.iloc[-2]) if len(closes) > 1 else last
        return last, round((last - previous) / previous * 100, 2)

    def _gold(self) -> GoldQuote:
        usd_per_ounce, change = self._last_close(GOLD_FUTURES_SYMBOL)
        inr_per_usd, _ = self._last_close(USD_INR_SYMBOL)
        price_24k = round(usd_per_ounce * inr_per_usd / TROY_OUNCE_GRAMS, 2)
        return GoldQuote(
            price_24k=price_24k,
            price_22k=round(price_24k * 22 / 24, 2),
            change_percent=change,
            trend=_trend(change),
            source="Yahoo Finance (COMEX gold futures, USD/INR)",
            last_updated=self._clock(),
        )

    def _market(self) -> MarketSnapshot:
        nifty, nifty_change = self._last_close(NIFTY_SYMBOL)
        sensex, sensex_change = self._last_close(SENSEX_SYMBOL)
        return MarketSnapshot(
            nifty=round(nifty, 2),
            nifty_change_percent=nifty_change,
            sensex=round(sensex, 2),
            sensex_change_percent=sensex_change,
            top_gainers=[],
            sentiment=_trend(nifty_change),
            last_updated=self._clock(),
        )


def create_market_data(source: str) -> MarketDataProvider:
    """Build the provider named by the ``MARKET_DATA_SOURCE`` setting."""
    if source == "yfinance":
        return YFinanceMarketData()
    return SimulatedMarketData()
