"""Fixtures for market data tests.

Provides a controllable clock and a scripted upstream provider so cache
expiry and fallback paths can be driven without a network.
"""

import asyncio
from collections import deque
from typing import Any

import pytest

from simplioptions.market.interface import MarketDataProvider
from simplioptions.market.mock_data import MockDataSynthesizer
from simplioptions.market.models import FundamentalKind
from simplioptions.market.service import QuoteCacheService


class FakeClock:
    """Callable clock whose time only moves when told to."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubProvider(MarketDataProvider):
    """Provider that replays scripted responses.

    Each queued item is returned as the payload, or raised if it is an
    exception. Once the queue is empty, ``default`` is used the same way.
    """

    def __init__(self, default: Any = None) -> None:
        self.default = default if default is not None else ConnectionError("upstream unreachable")
        self.quote_responses: deque[Any] = deque()
        self.fundamental_responses: deque[Any] = deque()
        self.quote_calls: list[str] = []
        self.fundamental_calls: list[tuple[str, FundamentalKind]] = []
        self.closed = False

    async def fetch_quote(self, symbol: str) -> Any:
        self.quote_calls.append(symbol)
        await asyncio.sleep(0)  # yield like a real network call
        return self._next(self.quote_responses)

    async def fetch_fundamental(self, symbol: str, kind: FundamentalKind) -> Any:
        self.fundamental_calls.append((symbol, kind))
        await asyncio.sleep(0)
        return self._next(self.fundamental_responses)

    async def aclose(self) -> None:
        self.closed = True

    def _next(self, queue: deque[Any]) -> Any:
        item = queue.popleft() if queue else self.default
        if isinstance(item, BaseException):
            raise item
        return item


def global_quote(symbol: str, price: str = "190.5000", change: str = "1.2500", percent: str = "0.6600%") -> dict:
    """A well-formed GLOBAL_QUOTE body."""
    return {
        "Global Quote": {
            "01. symbol": symbol,
            "02. open": "189.0000",
            "05. price": price,
            "06. volume": "51234567",
            "07. latest trading day": "2024-05-02",
            "09. change": change,
            "10. change percent": percent,
        }
    }


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def service(provider: StubProvider, clock: FakeClock) -> QuoteCacheService:
    return QuoteCacheService(
        provider=provider,
        synthesizer=MockDataSynthesizer(seed=1234),
        clock=clock,
    )


@pytest.fixture
def quote_payload():
    """Factory for well-formed GLOBAL_QUOTE bodies."""
    return global_quote
