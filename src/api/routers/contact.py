# This file defines the contact form endpoint under the versioned API path.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_contact_service
from src.api.response_envelope import build_object_envelope
from src.api.schemas.contact_schemas import ContactRequestV1, ContactResponseV1
from src.api.services.contact_service import ContactService

router = APIRouter(tags=["contact"])
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]


@router.post("/contact-us", response_model=ContactResponseV1)
def contact_us(
    request: Request,
    service: ContactServiceDep,
    config: ConfigDep,
    body: ContactRequestV1 | None = None,
) -> dict[str, object]:
    # A request without a body is treated as an empty submission.
    submission = body.model_dump(exclude_unset=True) if body is not None else {}
    receipt = service.submit(submission)
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=receipt,
    )
