"""Data models for market data."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from enum import Enum
from typing import Any


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


@dataclass(frozen=True, slots=True)
class Quote:
    """Immutable point-in-time price/volume snapshot for a ticker."""

    symbol: str
    price: float
    change: float
    change_percent: float
    volume: int
    timestamp: str = field(default_factory=utc_now_iso)  # ISO-8601, UTC
    mock_data_notice: str | None = None

    @property
    def is_mock(self) -> bool:
        """True when the quote was synthesized rather than fetched."""
        return self.mock_data_notice is not None

    def with_notice(self, notice: str) -> Quote:
        """Return a copy tagged with a simulated-data notice."""
        return replace(self, mock_data_notice=notice)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        data: dict[str, Any] = {
            "symbol": self.symbol,
            "price": self.price,
            "change": self.change,
            "changePercent": self.change_percent,
            "volume": self.volume,
            "timestamp": self.timestamp,
        }
        if self.mock_data_notice is not None:
            data["mockDataNotice"] = self.mock_data_notice
        return data


class FundamentalKind(str, Enum):
    """Company financial-statement datasets served by the upstream API.

    The value doubles as the cache-key prefix and the route segment.
    """

    OVERVIEW = "overview"
    INCOME_STATEMENT = "income"
    BALANCE_SHEET = "balance"
    CASH_FLOW = "cashflow"
    EARNINGS = "earnings"

    @property
    def api_function(self) -> str:
        """Upstream ``function=`` query parameter."""
        return _API_FUNCTIONS[self]

    @property
    def response_field(self) -> str:
        """Field name used in the aggregated financials response."""
        return _RESPONSE_FIELDS[self]

    @property
    def marker_field(self) -> str:
        """Top-level field a well-formed upstream payload must carry."""
        return _MARKER_FIELDS[self]


_API_FUNCTIONS = {
    FundamentalKind.OVERVIEW: "OVERVIEW",
    FundamentalKind.INCOME_STATEMENT: "INCOME_STATEMENT",
    FundamentalKind.BALANCE_SHEET: "BALANCE_SHEET",
    FundamentalKind.CASH_FLOW: "CASH_FLOW",
    FundamentalKind.EARNINGS: "EARNINGS",
}

_RESPONSE_FIELDS = {
    FundamentalKind.OVERVIEW: "overview",
    FundamentalKind.INCOME_STATEMENT: "incomeStatement",
    FundamentalKind.BALANCE_SHEET: "balanceSheet",
    FundamentalKind.CASH_FLOW: "cashFlow",
    FundamentalKind.EARNINGS: "earnings",
}

_MARKER_FIELDS = {
    FundamentalKind.OVERVIEW: "Symbol",
    FundamentalKind.INCOME_STATEMENT: "annualReports",
    FundamentalKind.BALANCE_SHEET: "annualReports",
    FundamentalKind.CASH_FLOW: "annualReports",
    FundamentalKind.EARNINGS: "annualEarnings",
}


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A cached value and the time it was stored (Unix seconds)."""

    key: str
    value: Any
    stored_at: float

    def age(self, now: float) -> float:
        return now - self.stored_at

    def is_valid(self, now: float, ttl: float) -> bool:
        """Staleness is computed, never stored."""
        return self.age(now) < ttl


@dataclass(frozen=True, slots=True)
class CacheStatistics:
    """Snapshot of lookup counters. ``total_requests == hits + misses``."""

    hits: int = 0
    misses: int = 0
    total_requests: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "totalRequests": self.total_requests,
        }


@dataclass(frozen=True, slots=True)
class CacheEntryStatus:
    symbol: str
    age: int  # whole seconds
    is_valid: bool

    def to_dict(self) -> dict[str, Any]:
        return {"symbol": self.symbol, "age": self.age, "isValid": self.is_valid}


@dataclass(frozen=True, slots=True)
class CacheStatusReport:
    """Introspection report for the quote cache."""

    total_entries: int
    valid_entries: int
    expired_entries: int
    cache_entries: list[CacheEntryStatus]
    stats: CacheStatistics
    cache_duration: int  # quote TTL, seconds
    cleared_entries: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalEntries": self.total_entries,
            "validEntries": self.valid_entries,
            "expiredEntries": self.expired_entries,
            "cacheEntries": [entry.to_dict() for entry in self.cache_entries],
            "stats": self.stats.to_dict(),
            "cacheDuration": self.cache_duration,
            "clearedEntries": self.cleared_entries,
        }
