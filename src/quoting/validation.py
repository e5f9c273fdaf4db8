# This file validates untrusted quote inputs before the calculator runs.
# Apartments and floors go through number, integer, positive and upper-bound checks in that order.
# The tier is checked last, so a bad count is reported even when the tier is also wrong.

from __future__ import annotations

import math
import re
from collections.abc import Mapping

from src.quoting.errors import (
    CountTooLargeError,
    InvalidNumberError,
    NonIntegerInputError,
    NonPositiveInputError,
    UnknownTierError,
)
from src.quoting.models import QuoteRequest
from src.quoting.pricing_tiers import DEFAULT_PRICING_TABLE, PricingTier

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

COUNT_FIELDS = ("apartments", "floors")

# Largest accepted apartment or floor count. Keeps every quote amount well inside float range.
MAX_COUNT = 1_000_000
_MAX_COUNT_DIGITS = len(str(MAX_COUNT))


def parse_count(value: object, *, field: str) -> int | float:
    """Parse one count field.

    Returns an `int` for integer input and a `float` for any other finite number,
    so the caller can reject fractional values separately from garbage.
    """

    if value is None or isinstance(value, bool):
        raise InvalidNumberError(
            "Apartments and floors must be valid numbers.", field=field, value=value
        )
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidNumberError(
                "Apartments and floors must be valid numbers.", field=field, value=value
            )
        return value

    text = str(value).strip()
    if _INTEGER_RE.match(text):
        digits = text.lstrip("+-").lstrip("0")
        if len(digits) > _MAX_COUNT_DIGITS:
            # Out of range either way; avoid converting arbitrarily long digit strings.
            return -(MAX_COUNT + 1) if text.startswith("-") else MAX_COUNT + 1
        return int(text)
    if _DECIMAL_RE.match(text):
        parsed = float(text)
        if math.isfinite(parsed):
            return parsed
    raise InvalidNumberError("Apartments and floors must be valid numbers.", field=field, value=value)


def validate_counts(apartments: object, floors: object) -> tuple[int, int]:
    raw = dict(zip(COUNT_FIELDS, (apartments, floors)))
    parsed = {field: parse_count(value, field=field) for field, value in raw.items()}

    for field, number in parsed.items():
        if not isinstance(number, int):
            raise NonIntegerInputError(
                "Apartments and floors must be integers.", field=field, value=raw[field]
            )

    for field, number in parsed.items():
        if number <= 0:
            raise NonPositiveInputError(
                "Apartments and floors must be greater than zero.", field=field, value=raw[field]
            )

    for field, number in parsed.items():
        if number > MAX_COUNT:
            raise CountTooLargeError(
                f"Apartments and floors must not exceed {MAX_COUNT:,}.", field=field, value=raw[field]
            )

    return int(parsed["apartments"]), int(parsed["floors"])


def describe_tiers(pricing: Mapping[str, PricingTier]) -> str:
    names = list(pricing)
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} or {names[1]}"
    return f"{', '.join(names[:-1])}, or {names[-1]}"


def validate_tier(tier: object, *, pricing: Mapping[str, PricingTier] = DEFAULT_PRICING_TABLE) -> str:
    if not isinstance(tier, str) or tier not in pricing:
        raise UnknownTierError(
            f"Invalid or missing tier. Must be {describe_tiers(pricing)}.",
            field="tier",
            value=tier,
        )
    return tier


def build_quote_request(
    apartments: object,
    floors: object,
    tier: object,
    *,
    pricing: Mapping[str, PricingTier] = DEFAULT_PRICING_TABLE,
) -> QuoteRequest:
    """Validate raw inputs and return a typed request."""

    num_apartments, num_floors = validate_counts(apartments, floors)
    tier_name = validate_tier(tier, pricing=pricing)
    return QuoteRequest(apartments=num_apartments, floors=num_floors, tier=tier_name)
