# This module computes residential elevator quotes from apartment and floor counts.
# One column serves up to 20 floors and one elevator serves up to 6 apartments per floor.
# Costs come from the injected pricing table and are rounded half-up to cents.

from __future__ import annotations

import math
from collections.abc import Mapping

from src.common.rounding import round_half_up
from src.quoting.errors import QuoteComputationError
from src.quoting.models import QuoteRequest, QuoteResult
from src.quoting.pricing_tiers import DEFAULT_PRICING_TABLE, PricingTier
from src.quoting.validation import build_quote_request

APARTMENTS_PER_ELEVATOR = 6
FLOORS_PER_COLUMN = 20


def elevators_required(apartments: int, floors: int) -> tuple[float, int, int, int]:
    apartments_per_floor = apartments / floors
    elevators_per_column = math.ceil(apartments_per_floor / APARTMENTS_PER_ELEVATOR)
    columns = math.ceil(floors / FLOORS_PER_COLUMN)
    return apartments_per_floor, elevators_per_column, columns, elevators_per_column * columns


def calculate(request: QuoteRequest, *, pricing: Mapping[str, PricingTier]) -> QuoteResult:
    """Run the quote formula on an already validated request."""

    tier = pricing.get(request.tier)
    if tier is None:
        raise QuoteComputationError(f"Invalid tier specified: {request.tier!r}")

    apartments_per_floor, per_column, columns, total_elevators = elevators_required(
        request.apartments, request.floors
    )
    total_unit_cost = total_elevators * tier.unit_price
    total_install_cost = total_unit_cost * tier.install_rate

    return QuoteResult(
        elevators_required=total_elevators,
        total_cost=round_half_up(total_unit_cost + total_install_cost),
        tier=tier.name,
        apartments_per_floor=apartments_per_floor,
        elevators_per_column=per_column,
        columns=columns,
        unit_price=tier.unit_price,
        install_rate=tier.install_rate,
        total_unit_cost=round_half_up(total_unit_cost),
        total_install_cost=round_half_up(total_install_cost),
    )


def compute_quote(
    apartments: object,
    floors: object,
    tier: object,
    *,
    pricing: Mapping[str, PricingTier] = DEFAULT_PRICING_TABLE,
) -> QuoteResult:
    """Validate inputs and compute a residential quote.

    Raises a `QuoteValidationError` subclass for rejected input; no partial
    result is ever returned.
    """

    request = build_quote_request(apartments, floors, tier, pricing=pricing)
    return calculate(request, pricing=pricing)
