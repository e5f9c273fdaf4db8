# This file defines request and response schemas for the contact form endpoint.
# Fields are optional and untyped at the schema level so the contact service decides
# what counts as missing and reports it with its own error code.

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from src.api.schemas.common import EnvelopeFields


class ContactRequestV1(BaseModel):
    model_config = ConfigDict(extra="allow")

    first_name: Any = None
    last_name: Any = None
    message: Any = None


class ContactReceiptV1(BaseModel):
    success: bool
    received: dict[str, Any]
    message: str


class ContactResponseV1(EnvelopeFields):
    data: ContactReceiptV1
