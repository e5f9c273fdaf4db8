# This file defines schemas for the residential quote and pricing tier endpoints.
# The quote payload carries the two headline numbers plus the breakdown that produced them.

from __future__ import annotations

from pydantic import BaseModel, Field

from src.api.schemas.common import EnvelopeFields


class QuoteBreakdownV1(BaseModel):
    apartments_per_floor: float
    elevators_per_column: int = Field(ge=0)
    columns: int = Field(ge=1)
    unit_price: float
    install_rate: float = Field(ge=0, le=1)
    total_unit_cost: float
    total_install_cost: float


class ResidentialQuoteV1(BaseModel):
    elevators_required: int = Field(ge=1)
    total_cost: float = Field(ge=0)
    tier: str
    breakdown: QuoteBreakdownV1
    quote_summary: str | None = None


class ResidentialQuoteResponseV1(EnvelopeFields):
    data: ResidentialQuoteV1


class PricingTierV1(BaseModel):
    name: str
    unit_price: float
    install_rate: float


class PricingTierListResponseV1(EnvelopeFields):
    data: list[PricingTierV1]
