"""Exceptions raised by the market data subsystem."""

from __future__ import annotations


class MarketDataError(Exception):
    """Base class for market data failures."""


class ProviderError(MarketDataError):
    """The upstream provider could not be reached or answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedPayloadError(MarketDataError):
    """The upstream answered, but the body is missing expected fields or is not JSON."""


class InvalidRequestError(MarketDataError, ValueError):
    """Caller input is missing or unusable. Surfaces as HTTP 400."""


class InvalidSymbolError(InvalidRequestError):
    """Caller passed a missing or blank ticker symbol."""
