# This file implements read services over the fixed agent directory.
# It exists so routers can return agent lists and region statistics without touching the raw table.

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from src.api.error_handlers import APIError
from src.api.plain_language import region_summary
from src.directory.agent_data import AgentRecord
from src.directory.region_stats import email_list, filter_by_region, list_regions, region_averages


class AgentService:
    """Lookups and aggregates over the in-memory agent table."""

    def __init__(self, *, agents: Sequence[AgentRecord]) -> None:
        self.agents = tuple(agents)

    def get_agents(self, *, region: str | None = None) -> list[dict[str, Any]]:
        selected = self.agents if region is None else filter_by_region(self.agents, region)
        return [agent.to_dict() for agent in selected]

    def get_email_list(self) -> dict[str, Any]:
        emails = email_list(self.agents)
        return {"emails": emails, "email_list": ",".join(emails)}

    def get_region_average(
        self,
        *,
        region: str | None,
        include_plain_language_fields: bool,
    ) -> dict[str, Any]:
        if region is None or region.strip() == "":
            raise APIError(
                status_code=400,
                error_code="MISSING_REGION",
                message="Region is required as query parameter",
            )

        averages = region_averages(self.agents, region)
        if averages is None:
            raise APIError(
                status_code=404,
                error_code="REGION_NOT_FOUND",
                message=f"No agents found in the supplied region ({region}).",
                details={"known_regions": list_regions(self.agents)},
            )

        payload = averages.to_dict()
        if include_plain_language_fields:
            payload["region_summary"] = region_summary(averages)
        return payload

    def agent_count(self) -> int:
        return len(self.agents)
