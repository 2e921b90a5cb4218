"""Options chain and Greeks for display purposes."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import numpy as np

from .models import Quote

RISK_FREE_RATE = 0.05
EXPIRATION_DAYS = (7, 30, 90)
STRIKE_MULTIPLIERS = (0.90, 1.00, 1.10)  # ITM call, ATM, OTM call
BASE_VOLATILITY_RANGE = (0.25, 0.45)
VOLATILITY_STEP = 0.02  # added per expiration, longer dated = higher vol
DAYS_PER_YEAR = 365


@dataclass(frozen=True, slots=True)
class Greeks:
    delta: float
    gamma: float
    theta: float
    vega: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def calculate_greeks(
    stock_price: float,
    strike_price: float,
    time_to_expiry: float,
    volatility: float,
    risk_free_rate: float = RISK_FREE_RATE,
) -> Greeks:
    """Simplified Black-Scholes Greeks for a call.

    Math:
        d1    = (ln(S/K) + (r + sigma^2/2) * T) / (sigma * sqrt(T))
        delta = e^(-rT) * (0.5 + 0.5 * tanh(d1 / 2))   # logistic approximation of N(d1)
        gamma = e^(-rT) * phi(d1) / (S * sigma * sqrt(T))
        theta = -S * sigma * phi(d1) / (2 * sqrt(T))
        vega  = S * sqrt(T) * phi(d1)

    with phi the standard normal density. Puts use the same values with
    delta negated.
    """
    if min(stock_price, strike_price, time_to_expiry, volatility) <= 0:
        raise ValueError("stock price, strike, time to expiry and volatility must be positive")

    sqrt_t = math.sqrt(time_to_expiry)
    d1 = (
        math.log(stock_price / strike_price) + (risk_free_rate + 0.5 * volatility**2) * time_to_expiry
    ) / (volatility * sqrt_t)
    discount = math.exp(-risk_free_rate * time_to_expiry)
    density = math.exp(-d1 * d1 / 2)

    delta = discount * (0.5 + 0.5 * math.tanh(d1 / 2))
    gamma = discount * density / (stock_price * volatility * math.sqrt(2 * math.pi * time_to_expiry))
    theta = -stock_price * volatility * density / (2 * math.sqrt(2 * math.pi * time_to_expiry))
    vega = stock_price * sqrt_t * density / math.sqrt(2 * math.pi)

    return Greeks(
        delta=round(delta, 4),
        gamma=round(gamma, 6),
        theta=round(theta, 4),
        vega=round(vega, 4),
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _strikes(price: float) -> list[int]:
    return [max(1, _round_half_up(price * m)) for m in STRIKE_MULTIPLIERS]


def _contract(
    rng: np.random.Generator,
    price: float,
    strike: int,
    intrinsic: float,
    greeks: Greeks,
    volatility: float,
    is_call: bool,
) -> dict[str, Any]:
    time_value = max(0.0, price * 0.1 - intrinsic)
    # Puts trade a little thinner than calls
    volume_span, oi_span = (500, 2000) if is_call else (400, 1500)
    return {
        "strike": strike,
        "bid": f"{intrinsic + time_value * 0.4:.2f}",
        "ask": f"{intrinsic + time_value * 0.6:.2f}",
        "last": f"{intrinsic + time_value * 0.5:.2f}",
        "volume": int(rng.integers(100, 100 + volume_span)),
        "openInterest": int(rng.integers(500, 500 + oi_span)),
        "impliedVolatility": round(volatility + float(rng.uniform(0, 0.1)), 3),
        "delta": greeks.delta if is_call else -greeks.delta,
        "gamma": greeks.gamma,
        "theta": greeks.theta,
        "vega": greeks.vega,
        "intrinsicValue": round(intrinsic, 2),
        "timeValue": round(time_value, 2),
    }


def build_options_chain(
    quote: Quote,
    rng: np.random.Generator | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build a three-expiration, three-strike options chain around ``quote.price``."""
    rng = rng if rng is not None else np.random.default_rng()
    now = now or datetime.now(UTC)
    price = quote.price
    base_volatility = float(rng.uniform(*BASE_VOLATILITY_RANGE))
    expirations = [now + timedelta(days=days) for days in EXPIRATION_DAYS]

    chain = []
    for index, expiry in enumerate(expirations):
        time_to_expiry = (expiry - now).total_seconds() / (DAYS_PER_YEAR * 24 * 3600)
        volatility = base_volatility + index * VOLATILITY_STEP
        calls, puts = [], []
        for strike in _strikes(price):
            greeks = calculate_greeks(price, strike, time_to_expiry, volatility)
            calls.append(_contract(rng, price, strike, max(0.0, price - strike), greeks, volatility, True))
            puts.append(_contract(rng, price, strike, max(0.0, strike - price), greeks, volatility, False))
        chain.append(
            {
                "expirationDate": expiry.isoformat(),
                "timeToExpiry": round(time_to_expiry, 3),
                "calls": calls,
                "puts": puts,
            }
        )

    result: dict[str, Any] = {
        "symbol": quote.symbol,
        "currentPrice": price,
        "impliedVolatility": round(base_volatility, 3),
        "riskFreeRate": RISK_FREE_RATE,
        "expirationDates": [expiry.isoformat() for expiry in expirations],
        "options": chain,
    }
    if quote.mock_data_notice is not None:
        result["mockDataNotice"] = quote.mock_data_notice
    return result
