# This file implements the service behind the residential quote endpoints.
# It exists so routers stay transport-focused while validation and pricing live in one layer.
# The service holds a read-only pricing table injected at construction and never mutates it.

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from src.api.error_handlers import APIError
from src.api.plain_language import quote_summary
from src.quoting.calculator import compute_quote
from src.quoting.errors import QuoteComputationError, QuoteValidationError
from src.quoting.pricing_tiers import PricingTier

logger = logging.getLogger(__name__)


class QuoteService:
    """Quote computation and tier lookup for API routes."""

    def __init__(self, *, pricing: Mapping[str, PricingTier]) -> None:
        self.pricing = pricing

    def residential_quote(
        self,
        *,
        apartments: object,
        floors: object,
        tier: object,
        include_plain_language_fields: bool,
    ) -> dict[str, Any]:
        try:
            result = compute_quote(apartments, floors, tier, pricing=self.pricing)
        except QuoteValidationError as exc:
            logger.info("Rejected quote request: %s (%s)", exc.error_code, exc.message)
            raise APIError.from_quote_error(exc) from exc
        except QuoteComputationError as exc:
            raise APIError.from_quote_error(exc) from exc

        payload = result.to_dict()
        if include_plain_language_fields:
            payload["quote_summary"] = quote_summary(result)
        return payload

    def list_tiers(self) -> list[dict[str, Any]]:
        return [tier.to_dict() for tier in self.pricing.values()]

    def tier_count(self) -> int:
        return len(self.pricing)
