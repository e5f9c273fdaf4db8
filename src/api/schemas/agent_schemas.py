# This file defines schemas for the agent directory endpoints.

from __future__ import annotations

from pydantic import BaseModel

from src.api.schemas.common import EnvelopeFields


class AgentV1(BaseModel):
    first_name: str
    last_name: str
    email: str
    region: str
    rating: str
    fee: str


class AgentListResponseV1(EnvelopeFields):
    data: list[AgentV1]


class EmailListV1(BaseModel):
    emails: list[str]
    email_list: str


class EmailListResponseV1(EnvelopeFields):
    data: EmailListV1


class RegionAverageV1(BaseModel):
    region: str
    agent_count: int
    average_rating: float
    average_fee: float
    region_summary: str | None = None


class RegionAverageResponseV1(EnvelopeFields):
    data: RegionAverageV1
