"""Indicative technical analysis and options-strategy recommendations.

Both are display data derived from a quote: the analysis snapshot draws its
indicators around the current price, and the strategy table sizes a fixed set
of playbooks to the caller's budget and conviction.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np

from .errors import InvalidRequestError
from .models import Quote, utc_now_iso
from .options import DAYS_PER_YEAR, RISK_FREE_RATE, Greeks, calculate_greeks

TIMEFRAME_DAYS = {"short": 7, "medium": 30, "long": 90}
DEFAULT_TIMEFRAME_DAYS = 30
DEFAULT_VOLATILITY = 0.3
MIN_STRIKE = 0.01

SUPPORT_FACTOR = 0.95
RESISTANCE_FACTOR = 1.05

ANALYSIS_RECOMMENDATIONS = (
    "Monitor key support and resistance levels",
    "Consider volatility expansion/contraction",
    "Watch for earnings announcements",
    "Track institutional buying/selling",
)

RISK_CONSIDERATIONS = (
    "Options involve substantial risk and are not suitable for all investors",
    "Time decay works against long option positions",
    "Volatility changes can significantly impact option prices",
    "Consider position sizing and risk management",
)


def build_market_analysis(quote: Quote, rng: np.random.Generator | None = None) -> dict[str, Any]:
    """Technical indicators, volatility and sentiment scores around ``quote.price``.

    Ranges:
        rsi in [45, 75), macd in [-1, 1)
        sma20 within +/-2%, sma50 within +/-4%, ema12 within +/-1% of price
        support / resistance at -5% / +5%
        historical vol in [0.25, 0.45), implied vol in [0.30, 0.45)
        percentile in [0, 100); sentiment bullish [20, 80), bearish [10, 50), neutral [10, 40)
    """
    rng = rng if rng is not None else np.random.default_rng()
    price = quote.price

    def uniform(low: float, high: float) -> float:
        return float(rng.uniform(low, high))

    result: dict[str, Any] = {
        "symbol": quote.symbol,
        "currentPrice": price,
        "technicalIndicators": {
            "rsi": round(uniform(45, 75), 2),
            "macd": round(uniform(-1, 1), 4),
            "movingAverages": {
                "sma20": round(price * uniform(0.98, 1.02), 2),
                "sma50": round(price * uniform(0.96, 1.04), 2),
                "ema12": round(price * uniform(0.99, 1.01), 2),
            },
            "support": round(price * SUPPORT_FACTOR, 2),
            "resistance": round(price * RESISTANCE_FACTOR, 2),
        },
        "volatility": {
            "historical": round(uniform(0.25, 0.45), 4),
            "implied": round(uniform(0.30, 0.45), 4),
            "percentile": int(rng.integers(0, 100)),
        },
        "sentiment": {
            "bullish": int(rng.integers(20, 80)),
            "bearish": int(rng.integers(10, 50)),
            "neutral": int(rng.integers(10, 40)),
        },
        "recommendations": list(ANALYSIS_RECOMMENDATIONS),
    }
    if quote.mock_data_notice is not None:
        result["mockDataNotice"] = quote.mock_data_notice
    return result


# (price, amount) -> figure
Sizing = Callable[[float, float], float]


@dataclass(frozen=True, slots=True)
class StrategyTemplate:
    """One options playbook.

    ``description`` and ``technical_description`` are format strings taking
    ``symbol`` and ``target`` (the strike the Greeks are priced at).
    ``max_profit`` of None means the upside is unlimited.
    """

    id: str
    name: str
    description: str
    technical_description: str
    strike_offset: float
    max_cost: Sizing
    max_profit: Sizing | None
    break_even: Sizing
    probability_bonus: int
    probability_cap: int
    risk_level: str
    strategy_type: str
    time_decay: str
    volatility_impact: str

    def build(
        self,
        symbol: str,
        price: float,
        amount: float,
        confidence: float,
        greeks_at: Callable[[float], Greeks],
    ) -> dict[str, Any]:
        target = max(MIN_STRIKE, price + self.strike_offset)
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description.format(symbol=symbol, target=target),
            "technicalDescription": self.technical_description.format(symbol=symbol, target=target),
            "maxCost": round(self.max_cost(price, amount), 2),
            "maxProfit": "Unlimited" if self.max_profit is None else round(self.max_profit(price, amount), 2),
            "breakEven": round(self.break_even(price, amount), 2),
            "probability": min(confidence + self.probability_bonus, self.probability_cap),
            "riskLevel": self.risk_level,
            "greeks": greeks_at(target).to_dict(),
            "strategyType": self.strategy_type,
            "timeDecay": self.time_decay,
            "volatilityImpact": self.volatility_impact,
        }


BULLISH_STRATEGIES = (
    StrategyTemplate(
        id="1",
        name="Long Call",
        description="Buy a call option to profit if {symbol} rises above ${target:.2f}",
        technical_description="Long 1 {symbol} call option",
        strike_offset=5,
        max_cost=lambda p, a: a * 0.1,
        max_profit=None,
        break_even=lambda p, a: p + a * 0.1 / 100,
        probability_bonus=0,
        probability_cap=80,
        risk_level="High",
        strategy_type="directional",
        time_decay="High",
        volatility_impact="Positive",
    ),
    StrategyTemplate(
        id="2",
        name="Bull Call Spread",
        description="Limited profit strategy with lower cost than buying a call",
        technical_description="Long 1 {symbol} call + Short 1 {symbol} call (higher strike)",
        strike_offset=5,
        max_cost=lambda p, a: a * 0.05,
        max_profit=lambda p, a: a * 0.15,
        break_even=lambda p, a: p + a * 0.05 / 100,
        probability_bonus=10,
        probability_cap=85,
        risk_level="Medium",
        strategy_type="defined_risk",
        time_decay="Medium",
        volatility_impact="Neutral",
    ),
    StrategyTemplate(
        id="3",
        name="Covered Call",
        description="Sell calls against stock you own to generate income",
        technical_description="Long 100 {symbol} shares + Short 1 {symbol} call",
        strike_offset=10,
        max_cost=lambda p, a: p * 100,
        max_profit=lambda p, a: a * 0.08,
        break_even=lambda p, a: p - a * 0.08 / 100,
        probability_bonus=15,
        probability_cap=90,
        risk_level="Low",
        strategy_type="income",
        time_decay="Positive",
        volatility_impact="Negative",
    ),
)

BEARISH_STRATEGIES = (
    StrategyTemplate(
        id="4",
        name="Long Put",
        description="Buy a put option to profit if {symbol} falls below ${target:.2f}",
        technical_description="Long 1 {symbol} put option",
        strike_offset=-5,
        max_cost=lambda p, a: a * 0.1,
        max_profit=lambda p, a: p * 100,
        break_even=lambda p, a: p - a * 0.1 / 100,
        probability_bonus=0,
        probability_cap=80,
        risk_level="High",
        strategy_type="directional",
        time_decay="High",
        volatility_impact="Positive",
    ),
    StrategyTemplate(
        id="5",
        name="Bear Put Spread",
        description="Limited profit strategy with lower cost than buying a put",
        technical_description="Long 1 {symbol} put + Short 1 {symbol} put (lower strike)",
        strike_offset=-5,
        max_cost=lambda p, a: a * 0.05,
        max_profit=lambda p, a: a * 0.15,
        break_even=lambda p, a: p - a * 0.05 / 100,
        probability_bonus=10,
        probability_cap=85,
        risk_level="Medium",
        strategy_type="defined_risk",
        time_decay="Medium",
        volatility_impact="Neutral",
    ),
    StrategyTemplate(
        id="6",
        name="Protective Put",
        description="Buy puts to protect existing stock position",
        technical_description="Long 100 {symbol} shares + Long 1 {symbol} put",
        strike_offset=-10,
        max_cost=lambda p, a: p * 100 + a * 0.05,
        max_profit=None,
        break_even=lambda p, a: p + a * 0.05 / 100,
        probability_bonus=20,
        probability_cap=95,
        risk_level="Low",
        strategy_type="protection",
        time_decay="High",
        volatility_impact="Positive",
    ),
)

NEUTRAL_STRATEGIES = (
    StrategyTemplate(
        id="7",
        name="Cash Secured Put",
        description="Sell a put option to earn income while agreeing to buy {symbol} at a discount",
        technical_description="Short 1 {symbol} put option",
        strike_offset=-10,
        max_cost=lambda p, a: p * 100,
        max_profit=lambda p, a: a * 0.08,
        break_even=lambda p, a: p - a * 0.08 / 100,
        probability_bonus=15,
        probability_cap=90,
        risk_level="Medium",
        strategy_type="income",
        time_decay="Positive",
        volatility_impact="Negative",
    ),
    StrategyTemplate(
        id="8",
        name="Iron Condor",
        description="Sell both a call and put spread to earn income in a sideways market",
        technical_description="Short 1 {symbol} call spread + Short 1 {symbol} put spread",
        strike_offset=0,
        max_cost=lambda p, a: a * 0.15,
        max_profit=lambda p, a: a * 0.12,
        break_even=lambda p, a: p,
        probability_bonus=20,
        probability_cap=95,
        risk_level="Medium",
        strategy_type="income",
        time_decay="Positive",
        volatility_impact="Negative",
    ),
    StrategyTemplate(
        id="9",
        name="Butterfly Spread",
        description="Limited risk strategy that profits if stock stays near current price",
        technical_description="Long 1 {symbol} call + Short 2 {symbol} calls + Long 1 {symbol} call",
        strike_offset=0,
        max_cost=lambda p, a: a * 0.03,
        max_profit=lambda p, a: a * 0.07,
        break_even=lambda p, a: p,
        probability_bonus=25,
        probability_cap=98,
        risk_level="Low",
        strategy_type="defined_risk",
        time_decay="High",
        volatility_impact="Negative",
    ),
)

STRATEGIES_BY_DIRECTION = {"up": BULLISH_STRATEGIES, "down": BEARISH_STRATEGIES}
SENTIMENT_BY_DIRECTION = {"up": "bullish", "down": "bearish"}


def recommend_strategies(
    quote: Quote,
    direction: str,
    timeframe: str,
    confidence: float,
    amount: float,
    volatility: float | None = None,
) -> dict[str, Any]:
    """Size the playbooks for ``direction`` ("up", "down", anything else is neutral).

    ``timeframe`` picks the expiry priced into the Greeks: short 7 days,
    medium 30, long 90, unknown values 30. ``volatility`` defaults to 0.3.

    Raises InvalidRequestError for a non-positive amount or volatility.
    """
    if amount <= 0:
        raise InvalidRequestError("Amount must be positive")
    if volatility is not None and volatility <= 0:
        raise InvalidRequestError("Volatility must be positive")

    days = TIMEFRAME_DAYS.get(timeframe, DEFAULT_TIMEFRAME_DAYS)
    time_to_expiry = days / DAYS_PER_YEAR
    volatility = volatility or DEFAULT_VOLATILITY
    price = quote.price

    def greeks_at(strike: float) -> Greeks:
        return calculate_greeks(price, strike, time_to_expiry, volatility)

    templates = STRATEGIES_BY_DIRECTION.get(direction, NEUTRAL_STRATEGIES)
    strategies = [
        template.build(quote.symbol, price, amount, confidence, greeks_at) for template in templates
    ]

    result: dict[str, Any] = {
        "strategies": strategies,
        "marketAnalysis": {
            "currentPrice": price,
            "volatility": volatility,
            "timeToExpiry": time_to_expiry,
            "riskFreeRate": RISK_FREE_RATE,
            "marketSentiment": SENTIMENT_BY_DIRECTION.get(direction, "neutral"),
            "recommendedStrategies": len(strategies),
            "riskConsiderations": list(RISK_CONSIDERATIONS),
        },
        "timestamp": utc_now_iso(),
    }
    if quote.mock_data_notice is not None:
        result["mockDataNotice"] = quote.mock_data_notice
    return result
