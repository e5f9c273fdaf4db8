# This file defines the residential quote endpoints under the versioned API path.
# Query values arrive as raw strings so the quote validator, not FastAPI coercion,
# decides between invalid-number, non-integer, non-positive, and unknown-tier errors.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_quote_service
from src.api.response_envelope import build_object_envelope
from src.api.schemas.quote_schemas import PricingTierListResponseV1, ResidentialQuoteResponseV1
from src.api.services.quote_service import QuoteService

router = APIRouter(tags=["quotes"])
QuoteServiceDep = Annotated[QuoteService, Depends(get_quote_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get(
    "/calc-residential",
    response_model=ResidentialQuoteResponseV1,
    response_model_exclude_none=True,
)
def calc_residential(
    request: Request,
    service: QuoteServiceDep,
    config: ConfigDep,
    apartments: str | None = Query(default=None),
    floors: str | None = Query(default=None),
    tier: str | None = Query(default=None),
) -> dict[str, object]:
    quote = service.residential_quote(
        apartments=apartments,
        floors=floors,
        tier=tier,
        include_plain_language_fields=config.include_plain_language_fields,
    )
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=quote,
    )


@router.get("/pricing/tiers", response_model=PricingTierListResponseV1)
def pricing_tiers(
    request: Request,
    service: QuoteServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=service.list_tiers(),
    )
