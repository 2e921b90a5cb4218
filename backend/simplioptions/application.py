"""Application factory for the SimpliOptions backend.

Importing this module has no side effects; ``simplioptions.main`` builds the
served app and configures logging.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .market import InvalidRequestError, QuoteCacheService, create_market_router, create_quote_cache_service

logger = logging.getLogger(__name__)


def create_app(service: QuoteCacheService | None = None) -> FastAPI:
    """Build the application around one QuoteCacheService.

    The service (and its upstream provider) lives as long as the app; the
    provider's HTTP client is closed on shutdown.
    """
    service = service or create_quote_cache_service()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("SimpliOptions backend starting")
        try:
            yield
        finally:
            await service.provider.aclose()
            logger.info("SimpliOptions backend stopped")

    app = FastAPI(title="SimpliOptions API", version="1.0.0", lifespan=lifespan)
    app.state.quote_service = service
    app.include_router(create_market_router(service))

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"message": str(exc)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal Server Error"})

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "message": "SimpliOptions backend is healthy"}

    return app
