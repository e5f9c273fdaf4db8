# This file defines agent directory endpoints under the versioned API path.
# It exists so clients can list agents, fetch the email list, and compare regions.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_agent_service, get_config
from src.api.response_envelope import build_object_envelope
from src.api.schemas.agent_schemas import (
    AgentListResponseV1,
    EmailListResponseV1,
    RegionAverageResponseV1,
)
from src.api.services.agent_service import AgentService

router = APIRouter(tags=["agents"])
AgentServiceDep = Annotated[AgentService, Depends(get_agent_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.get("/agents", response_model=AgentListResponseV1)
def agents_list(
    request: Request,
    service: AgentServiceDep,
    config: ConfigDep,
    region: str | None = Query(default=None),
) -> dict[str, object]:
    rows = service.get_agents(region=region)
    warnings = [f"No agents found in region {region!r}."] if region is not None and not rows else None
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=rows,
        warnings=warnings,
    )


@router.get("/email-list", response_model=EmailListResponseV1)
def agents_email_list(
    request: Request,
    service: AgentServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=service.get_email_list(),
    )


@router.get(
    "/region-avg",
    response_model=RegionAverageResponseV1,
    response_model_exclude_none=True,
)
def agents_region_average(
    request: Request,
    service: AgentServiceDep,
    config: ConfigDep,
    region: str | None = Query(default=None),
) -> dict[str, object]:
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=service.get_region_average(
            region=region,
            include_plain_language_fields=config.include_plain_language_fields,
        ),
    )
