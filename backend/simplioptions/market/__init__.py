"""Market data subsystem for SimpliOptions.

Public API:
    Quote                      - Immutable quote snapshot dataclass
    FundamentalKind            - Financial-statement datasets (overview, income, ...)
    TTLCache                   - Thread-safe in-memory store with lazy expiry and stats
    MarketDataProvider         - Abstract interface for upstream APIs
    AlphaVantageProvider       - httpx-backed Alpha Vantage client
    MockDataSynthesizer        - Curated and synthesized fallback data
    QuoteCacheService          - Cache, fetch, or fall back to mock data
    create_quote_cache_service - Factory wiring the service to the environment
    build_options_chain        - Mock options chain priced with Black-Scholes Greeks
    build_market_analysis      - Indicative technical-analysis snapshot for a quote
    recommend_strategies       - Options strategies for a directional view
    create_market_router       - FastAPI router factory for /api/market
"""

from .alpha_vantage import AlphaVantageProvider
from .analysis import build_market_analysis, recommend_strategies
from .cache import TTLCache
from .errors import (
    InvalidRequestError,
    InvalidSymbolError,
    MalformedPayloadError,
    MarketDataError,
    ProviderError,
)
from .factory import create_market_data_provider, create_quote_cache_service
from .interface import MarketDataProvider
from .mock_data import MockDataSynthesizer
from .models import CacheStatistics, CacheStatusReport, FundamentalKind, Quote
from .options import build_options_chain, calculate_greeks
from .routes import create_market_router
from .service import QuoteCacheService

__all__ = [
    "Quote",
    "FundamentalKind",
    "CacheStatistics",
    "CacheStatusReport",
    "TTLCache",
    "MarketDataProvider",
    "AlphaVantageProvider",
    "MockDataSynthesizer",
    "QuoteCacheService",
    "MarketDataError",
    "ProviderError",
    "MalformedPayloadError",
    "InvalidRequestError",
    "InvalidSymbolError",
    "build_options_chain",
    "calculate_greeks",
    "build_market_analysis",
    "recommend_strategies",
    "create_market_data_provider",
    "create_quote_cache_service",
    "create_market_router",
]
