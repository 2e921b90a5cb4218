"""Alpha Vantage REST client for real market data."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import MalformedPayloadError, ProviderError
from .interface import MarketDataProvider
from .models import FundamentalKind

logger = logging.getLogger(__name__)

ALPHA_VANTAGE_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_TIMEOUT = 10.0


class AlphaVantageProvider(MarketDataProvider):
    """MarketDataProvider backed by the Alpha Vantage query API.

    Every dataset is a GET on the same endpoint, selected by ``function=``:
      - GLOBAL_QUOTE for quotes
      - OVERVIEW / INCOME_STATEMENT / BALANCE_SHEET / CASH_FLOW / EARNINGS

    Rate limits:
      - The free ("demo") tier answers 200 OK with a ``Note`` or ``Information``
        field instead of data. That is not an HTTP error, so it is returned
        as-is for the caller to classify.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = ALPHA_VANTAGE_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_quote(self, symbol: str) -> Any:
        return await self._query("GLOBAL_QUOTE", symbol)

    async def fetch_fundamental(self, symbol: str, kind: FundamentalKind) -> Any:
        return await self._query(kind.api_function, symbol)

    async def aclose(self) -> None:
        if not self._client.is_closed:
            await self._client.aclose()
            logger.info("Alpha Vantage client closed")

    # --- Internal ---

    async def _query(self, function: str, symbol: str) -> Any:
        """GET one dataset and decode the JSON body.

        Raises ProviderError for transport failures and non-2xx statuses,
        MalformedPayloadError for a body that is not JSON.
        """
        params = {"function": function, "symbol": symbol, "apikey": self._api_key}
        try:
            response = await self._client.get(self._base_url, params=params)
        except httpx.HTTPError as e:
            raise ProviderError(f"{function} request for {symbol} failed: {e}") from e

        if not response.is_success:
            raise ProviderError(
                f"{function} request for {symbol} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise MalformedPayloadError(f"{function} response for {symbol} is not JSON") from e
