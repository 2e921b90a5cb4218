"""Quote cache with live fetch and mock-data fallback."""

from __future__ import annotations

import asyncio
import logging
import math
import time
from collections.abc import Callable
from typing import Any

from .cache import TTLCache
from .errors import InvalidSymbolError, MalformedPayloadError
from .interface import MarketDataProvider
from .mock_data import MockDataSynthesizer
from .models import CacheEntryStatus, CacheStatusReport, FundamentalKind, Quote, utc_now_iso
from .payloads import check_fundamental, parse_quote, rate_limit_message

logger = logging.getLogger(__name__)

QUOTE_TTL_SECONDS = 5 * 60
FUNDAMENTAL_TTL_SECONDS = 60 * 60

QUOTE_KEY_PREFIX = "quote_"

RATE_LIMIT_NOTICE = (
    "Using mock data for {symbol} due to API rate limits. "
    "Real-time data will resume when limits reset."
)
RESPONSE_ISSUE_NOTICE = "Using mock data for {symbol} due to API response issues."
CONNECTIVITY_NOTICE = "Using mock data for {symbol} due to network connectivity issues."


def normalize_symbol(symbol: str | None) -> str:
    """Upper-case and strip a ticker. Raises InvalidSymbolError if blank."""
    if symbol is None or not str(symbol).strip():
        raise InvalidSymbolError("Symbol is required")
    return str(symbol).strip().upper()


class QuoteCacheService:
    """Serves quotes and fundamentals from cache, upstream, or mock data.

    Per key, an entry is Absent, Fresh, or Stale. Staleness is never stored;
    it is computed from the entry's insertion time on every read. A stale or
    absent key triggers one upstream fetch. Whatever that fetch produces (a
    parsed payload, or mock data when upstream is throttled, malformed or
    unreachable) is cached under the key.

    Quotes and fundamentals live in separate caches with separate TTLs.
    Only quote lookups are counted in the statistics.

    Concurrent misses for the same key are not de-duplicated: each one
    fetches upstream and the last write wins.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        synthesizer: MockDataSynthesizer | None = None,
        quote_ttl: float = QUOTE_TTL_SECONDS,
        fundamental_ttl: float = FUNDAMENTAL_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._provider = provider
        self._synth = synthesizer or MockDataSynthesizer()
        self._quotes = TTLCache(ttl=quote_ttl, clock=clock)
        self._fundamentals = TTLCache(ttl=fundamental_ttl, clock=clock)

    @property
    def provider(self) -> MarketDataProvider:
        return self._provider

    # --- Quotes ---

    async def get_quote(self, symbol: str) -> Quote:
        """Return a quote for ``symbol``. Never raises for upstream failures.

        Raises InvalidSymbolError for a missing or blank symbol.
        """
        symbol = normalize_symbol(symbol)
        key = f"{QUOTE_KEY_PREFIX}{symbol}"

        entry = self._quotes.lookup(key)
        if entry is not None:
            logger.debug("Cache HIT for %s (age: %ds)", symbol, entry.age(self._quotes.now()))
            return entry.value

        logger.info("Cache MISS for %s - fetching from API", symbol)
        quote = await self._fetch_quote(symbol)
        self._quotes.store(key, quote)
        return quote

    async def _fetch_quote(self, symbol: str) -> Quote:
        try:
            payload = await self._provider.fetch_quote(symbol)
        except MalformedPayloadError as e:
            logger.warning("Unusable quote response for %s: %s", symbol, e)
            return self._mock_quote(symbol, RESPONSE_ISSUE_NOTICE)
        except Exception as e:
            logger.error("Error fetching quote for %s: %s", symbol, e)
            return self._mock_quote(symbol, CONNECTIVITY_NOTICE)

        limit_message = rate_limit_message(payload)
        if limit_message is not None:
            logger.warning("API limit reached for %s - using mock data: %s", symbol, limit_message)
            return self._mock_quote(symbol, RATE_LIMIT_NOTICE)

        try:
            quote = parse_quote(payload)
        except MalformedPayloadError as e:
            logger.warning("Invalid quote response for %s: %s", symbol, e)
            return self._mock_quote(symbol, RESPONSE_ISSUE_NOTICE)

        logger.info("Fetched and cached live quote for %s", symbol)
        return quote

    def _mock_quote(self, symbol: str, notice_template: str) -> Quote:
        return self._synth.quote(symbol).with_notice(notice_template.format(symbol=symbol))

    # --- Fundamentals ---

    async def get_fundamental(self, symbol: str, kind: FundamentalKind | str) -> dict[str, Any]:
        """Return a financial-statement payload, falling back to mock data.

        Raises InvalidSymbolError for a blank symbol and ValueError for an
        unknown kind.
        """
        symbol = normalize_symbol(symbol)
        kind = FundamentalKind(kind)
        key = f"{kind.value}_{symbol}"

        entry = self._fundamentals.lookup(key)
        if entry is not None:
            logger.debug("Cache HIT for %s %s", symbol, kind.value)
            return entry.value

        logger.info("Cache MISS for %s %s - fetching from API", symbol, kind.value)
        payload = await self._fetch_fundamental(symbol, kind)
        self._fundamentals.store(key, payload)
        return payload

    async def _fetch_fundamental(self, symbol: str, kind: FundamentalKind) -> dict[str, Any]:
        try:
            raw = await self._provider.fetch_fundamental(symbol, kind)
        except Exception as e:
            logger.error("Error fetching %s for %s: %s", kind.value, symbol, e)
            return self._synth.fundamental(symbol, kind)

        if rate_limit_message(raw) is not None:
            logger.warning("API limit reached for %s %s - using mock data", symbol, kind.value)
            return self._synth.fundamental(symbol, kind)

        try:
            return check_fundamental(raw, kind)
        except MalformedPayloadError as e:
            logger.warning("Invalid %s response for %s: %s", kind.value, symbol, e)
            return self._synth.fundamental(symbol, kind)

    async def get_financials(self, symbol: str) -> dict[str, Any]:
        """Fetch every fundamental dataset for ``symbol`` concurrently."""
        symbol = normalize_symbol(symbol)
        kinds = list(FundamentalKind)
        payloads = await asyncio.gather(*(self.get_fundamental(symbol, kind) for kind in kinds))
        result: dict[str, Any] = {kind.response_field: payload for kind, payload in zip(kinds, payloads)}
        result["symbol"] = symbol
        result["timestamp"] = utc_now_iso()
        return result

    # --- Maintenance ---

    def get_cache_status(self) -> CacheStatusReport:
        """Purge expired quote entries, then report on what remains.

        Fundamental entries are not purged here.
        """
        cleared = self._quotes.purge_expired()
        if cleared:
            logger.info("Cleared %d expired cache entries", cleared)

        now = self._quotes.now()
        statuses = [
            CacheEntryStatus(
                symbol=entry.key.removeprefix(QUOTE_KEY_PREFIX),
                age=math.floor(entry.age(now)),
                is_valid=entry.is_valid(now, self._quotes.ttl),
            )
            for entry in self._quotes.entries()
        ]
        valid = sum(1 for status in statuses if status.is_valid)
        return CacheStatusReport(
            total_entries=len(statuses),
            valid_entries=valid,
            expired_entries=len(statuses) - valid,
            cache_entries=statuses,
            stats=self._quotes.stats,
            cache_duration=int(self._quotes.ttl),
            cleared_entries=cleared,
        )

    def clear_cache(self) -> int:
        """Drop every quote entry and reset statistics. Returns the number removed."""
        cleared = self._quotes.clear()
        logger.info("Quote cache cleared (%d entries)", cleared)
        return cleared
