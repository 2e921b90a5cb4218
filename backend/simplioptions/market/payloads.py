"""Classification and parsing of raw upstream payloads."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from .errors import MalformedPayloadError
from .models import FundamentalKind, Quote

# Fields Alpha Vantage puts in a 200 OK body instead of data when throttled
RATE_LIMIT_FIELDS = ("Note", "Information")
ERROR_FIELD = "Error Message"


def rate_limit_message(payload: Any) -> str | None:
    """Return the upstream throttling message, or None if the payload is not throttled."""
    if not isinstance(payload, Mapping):
        return None
    for field_name in RATE_LIMIT_FIELDS:
        message = payload.get(field_name)
        if message:
            return str(message)
    return None


def parse_quote(payload: Any) -> Quote:
    """Build a Quote from a GLOBAL_QUOTE payload.

    Raises MalformedPayloadError if any expected field is missing or unparsable,
    or if the price is not a finite positive number.
    """
    if not isinstance(payload, Mapping):
        raise MalformedPayloadError(f"expected a JSON object, got {type(payload).__name__}")

    quote = payload.get("Global Quote")
    if not isinstance(quote, Mapping) or not quote.get("01. symbol"):
        raise MalformedPayloadError("missing 'Global Quote' or '01. symbol'")

    try:
        parsed = Quote(
            symbol=str(quote["01. symbol"]).upper(),
            price=float(quote["05. price"]),
            change=float(quote["09. change"]),
            change_percent=float(str(quote["10. change percent"]).replace("%", "")),
            volume=int(float(quote["06. volume"])),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedPayloadError(f"unparsable quote field: {e}") from e

    if not math.isfinite(parsed.price) or parsed.price <= 0:
        raise MalformedPayloadError(f"implausible price {quote['05. price']!r}")
    if not (math.isfinite(parsed.change) and math.isfinite(parsed.change_percent)):
        raise MalformedPayloadError("non-finite change fields")
    return parsed


def check_fundamental(payload: Any, kind: FundamentalKind) -> dict[str, Any]:
    """Validate a financial-statement payload and return it as a plain dict.

    Raises MalformedPayloadError for empty bodies, upstream error messages,
    or payloads lacking the kind's marker field.
    """
    if not isinstance(payload, Mapping) or not payload:
        raise MalformedPayloadError(f"empty or non-object {kind.value} payload")
    if ERROR_FIELD in payload:
        raise MalformedPayloadError(str(payload[ERROR_FIELD]))
    if kind.marker_field not in payload:
        raise MalformedPayloadError(f"{kind.value} payload lacks '{kind.marker_field}'")
    return dict(payload)
