"""REST endpoints for quotes, fundamentals, options, analysis and cache maintenance."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from .analysis import build_market_analysis, recommend_strategies
from .errors import InvalidRequestError
from .models import FundamentalKind
from .options import build_options_chain
from .service import QuoteCacheService

logger = logging.getLogger(__name__)


class StrategyRequest(BaseModel):
    """Body of POST /strategies/recommend. Unknown fields are ignored."""

    symbol: str | None = None
    direction: str | None = None  # "up", "down" or neutral
    timeframe: str | None = None  # "short", "medium" or "long"
    confidence: float | None = None
    amount: float | None = None
    volatility: float | None = None

    def require_fields(self) -> None:
        if not all((self.symbol, self.direction, self.timeframe, self.confidence, self.amount)):
            raise InvalidRequestError("Missing required fields")


def create_market_router(service: QuoteCacheService) -> APIRouter:
    """Create the market data router bound to a QuoteCacheService.

    This factory pattern lets us inject the service without globals.
    Blank symbols and incomplete strategy requests surface as
    InvalidRequestError, which the application maps to 400.
    """
    router = APIRouter(prefix="/api/market", tags=["market"])

    @router.get("/quote/{symbol}")
    async def get_quote(symbol: str) -> dict[str, Any]:
        """Latest quote. Falls back to mock data (with ``mockDataNotice``) when upstream fails."""
        quote = await service.get_quote(symbol)
        return quote.to_dict()

    @router.get("/options/{symbol}")
    async def get_options_chain(symbol: str) -> dict[str, Any]:
        quote = await service.get_quote(symbol)
        return build_options_chain(quote)

    @router.get("/financial/{symbol}")
    async def get_financials(symbol: str) -> dict[str, Any]:
        """Overview, statements and earnings in one response."""
        return await service.get_financials(symbol)

    @router.get("/analysis/{symbol}")
    async def get_market_analysis(symbol: str) -> dict[str, Any]:
        """Indicative technical indicators and sentiment around the current quote."""
        quote = await service.get_quote(symbol)
        return build_market_analysis(quote)

    @router.post("/strategies/recommend")
    async def recommend(body: StrategyRequest) -> dict[str, Any]:
        body.require_fields()
        quote = await service.get_quote(body.symbol)
        logger.info("Recommending %s strategies for %s", body.direction, quote.symbol)
        return recommend_strategies(
            quote,
            direction=body.direction,
            timeframe=body.timeframe,
            confidence=body.confidence,
            amount=body.amount,
            volatility=body.volatility,
        )

    for kind in FundamentalKind:
        router.add_api_route(
            f"/{kind.value}/{{symbol}}",
            _fundamental_endpoint(service, kind),
            methods=["GET"],
            name=f"get_{kind.value}",
        )

    @router.get("/cache/status")
    async def get_cache_status() -> dict[str, Any]:
        report = service.get_cache_status()
        return {**report.to_dict(), "message": "Cache status retrieved successfully"}

    @router.delete("/cache/clear")
    async def clear_cache() -> dict[str, Any]:
        cleared = service.clear_cache()
        return {"message": "Cache cleared successfully", "clearedEntries": cleared}

    return router


def _fundamental_endpoint(service: QuoteCacheService, kind: FundamentalKind):
    async def endpoint(symbol: str) -> dict[str, Any]:
        return await service.get_fundamental(symbol, kind)

    endpoint.__doc__ = f"{kind.response_field} payload for a symbol."
    return endpoint
