# This module answers lookups over the agent table: email lists, region filters, and averages.
# Region matching is case-insensitive and exact; averages are plain arithmetic means.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from src.common.rounding import round_half_up
from src.directory.agent_data import AgentRecord


@dataclass(frozen=True)
class RegionAverages:
    region: str
    agent_count: int
    average_rating: float
    average_fee: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "region": self.region,
            "agent_count": self.agent_count,
            "average_rating": self.average_rating,
            "average_fee": self.average_fee,
        }


def _as_float(raw: str | None) -> float:
    if raw is None or str(raw).strip() == "":
        return 0.0
    return float(raw)


def email_list(agents: Iterable[AgentRecord]) -> list[str]:
    return [agent.email for agent in agents]


def list_regions(agents: Iterable[AgentRecord]) -> list[str]:
    return sorted({agent.region.lower() for agent in agents})


def filter_by_region(agents: Iterable[AgentRecord], region: str) -> list[AgentRecord]:
    region_lower = region.lower()
    return [agent for agent in agents if agent.region.lower() == region_lower]


def region_averages(agents: Iterable[AgentRecord], region: str) -> RegionAverages | None:
    """Average rating and fee for one region, or None when no agent matches."""

    matched = filter_by_region(agents, region)
    if not matched:
        return None

    total_rating = sum(_as_float(agent.rating) for agent in matched)
    total_fee = sum(_as_float(agent.fee) for agent in matched)
    count = len(matched)
    return RegionAverages(
        region=region,
        agent_count=count,
        average_rating=round_half_up(total_rating / count),
        average_fee=round_half_up(total_fee / count),
    )
