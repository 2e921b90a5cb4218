"""Mock market data used when the upstream API is unavailable."""

from __future__ import annotations

import copy
import logging
from typing import Any

import numpy as np

from .models import FundamentalKind, Quote
from .mock_seed import (
    MOCK_BALANCE_SHEET,
    MOCK_CASH_FLOW,
    MOCK_EARNINGS,
    MOCK_INCOME_STATEMENT,
    MOCK_OVERVIEWS,
    MOCK_QUOTES,
    PRICE_RANGE,
    VOLATILITY_RANGE,
    VOLUME_RANGE,
)

logger = logging.getLogger(__name__)

# Statement mocks are only canonical for the symbols we have an overview for
REFERENCE_SYMBOLS = frozenset(MOCK_OVERVIEWS)

_STATEMENTS: dict[FundamentalKind, dict[str, list[dict[str, str]]]] = {
    FundamentalKind.INCOME_STATEMENT: MOCK_INCOME_STATEMENT,
    FundamentalKind.BALANCE_SHEET: MOCK_BALANCE_SHEET,
    FundamentalKind.CASH_FLOW: MOCK_CASH_FLOW,
    FundamentalKind.EARNINGS: MOCK_EARNINGS,
}


class MockDataSynthesizer:
    """Builds stand-in quotes and financial statements.

    Quotes:
        Symbols in MOCK_QUOTES get their curated figures, so repeated calls
        agree. Any other symbol gets bounded pseudo-random figures:

            price      ~ U(20, 320)
            volatility ~ U(0.02, 0.05)
            change     = volatility * price * U(-0.5, 0.5)
            volume     ~ U{100_000, ..., 5_099_999}

        These are drawn fresh on every call and are not reproducible.

    Fundamentals:
        Reference symbols get fixed canonical payloads; others get a
        minimal default object.
    """

    def __init__(self, rng: np.random.Generator | None = None, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    def quote(self, symbol: str) -> Quote:
        """Mock quote for an upper-cased symbol. Carries no notice; callers tag it."""
        curated = MOCK_QUOTES.get(symbol)
        if curated is not None:
            price, change, change_percent, volume = curated
            return Quote(
                symbol=symbol,
                price=price,
                change=change,
                change_percent=change_percent,
                volume=volume,
            )

        base_price = float(self._rng.uniform(*PRICE_RANGE))
        volatility = float(self._rng.uniform(*VOLATILITY_RANGE))
        change = (float(self._rng.uniform()) - 0.5) * base_price * volatility
        change_percent = change / base_price * 100
        volume = int(self._rng.integers(*VOLUME_RANGE))

        logger.debug("Synthesized quote for %s: %.2f", symbol, base_price)
        return Quote(
            symbol=symbol,
            price=round(base_price, 2),
            change=round(change, 2),
            change_percent=round(change_percent, 2),
            volume=volume,
        )

    def fundamental(self, symbol: str, kind: FundamentalKind) -> dict[str, Any]:
        """Mock financial-statement payload. Always a fresh, caller-owned dict."""
        if kind is FundamentalKind.OVERVIEW:
            overview = MOCK_OVERVIEWS.get(symbol)
            if overview is not None:
                return dict(overview)
            return {
                "Symbol": symbol,
                "Name": f"{symbol} Corporation",
                "Description": "A leading technology company",
                "MarketCapitalization": "100000000000",
                "PERatio": "20.0",
                "EPS": "5.0",
                "DividendYield": "2.0",
            }

        template = _STATEMENTS[kind]
        if symbol in REFERENCE_SYMBOLS:
            return {"symbol": symbol, **copy.deepcopy(template)}
        return {"symbol": symbol, **{section: [] for section in template}}
