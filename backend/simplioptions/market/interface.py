"""Abstract interface for upstream market data providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .models import FundamentalKind


class MarketDataProvider(ABC):
    """Contract for upstream market data APIs.

    Providers are untrusted and unreliable. They return the raw decoded body
    of the upstream response without validating it; QuoteCacheService decides
    whether the payload is usable. A provider may raise on transport failures.

    Lifecycle:
        provider = create_market_data_provider()
        service = QuoteCacheService(provider)
        # ... app runs ...
        await provider.aclose()
    """

    @abstractmethod
    async def fetch_quote(self, symbol: str) -> Any:
        """Fetch the raw quote payload for an upper-cased symbol."""

    @abstractmethod
    async def fetch_fundamental(self, symbol: str, kind: FundamentalKind) -> Any:
        """Fetch the raw financial-statement payload of the given kind."""

    async def aclose(self) -> None:
        """Release network resources. Safe to call multiple times."""
