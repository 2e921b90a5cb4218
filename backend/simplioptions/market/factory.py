"""Factories for the upstream provider and the quote cache service."""

from __future__ import annotations

import logging
import os

from .alpha_vantage import AlphaVantageProvider
from .interface import MarketDataProvider
from .service import QuoteCacheService

logger = logging.getLogger(__name__)

DEMO_API_KEY = "demo"


def create_market_data_provider() -> MarketDataProvider:
    """Create the upstream provider from environment variables.

    - ALPHA_VANTAGE_API_KEY set and non-empty → that key
    - Otherwise → the public "demo" key, which is heavily rate limited, so
      most symbols will be served from mock data

    Caller owns the provider and must ``await provider.aclose()``.
    """
    api_key = os.environ.get("ALPHA_VANTAGE_API_KEY", "").strip()

    if api_key:
        logger.info("Market data provider: Alpha Vantage")
    else:
        api_key = DEMO_API_KEY
        logger.warning("ALPHA_VANTAGE_API_KEY not set - using demo key, expect mock data")
    return AlphaVantageProvider(api_key=api_key)


def create_quote_cache_service(provider: MarketDataProvider | None = None) -> QuoteCacheService:
    """Create a QuoteCacheService, building the provider from the environment if omitted."""
    return QuoteCacheService(provider=provider or create_market_data_provider())
