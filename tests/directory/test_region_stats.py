# This test file covers agent lookups and region averages over the fixed agent table.

from __future__ import annotations

import pytest

from src.directory.agent_data import AGENTS, AgentRecord
from src.directory.region_stats import (
    email_list,
    filter_by_region,
    list_regions,
    region_averages,
)


def test_agent_table_is_fixed() -> None:
    assert len(AGENTS) == 16
    assert AGENTS[0].full_name == "Orlando Perez"
    with pytest.raises(AttributeError):
        AGENTS[0].region = "west"  # type: ignore[misc]


def test_email_list_preserves_table_order() -> None:
    emails = email_list(AGENTS)
    assert emails[:3] == ["perez@rocket.elv", "brutus@rocket.elv", "bob@rocket.elv"]
    assert len(emails) == len(AGENTS)


def test_list_regions_is_sorted_and_distinct() -> None:
    assert list_regions(AGENTS) == ["east", "north", "south"]


def test_filter_by_region_ignores_case_but_not_whitespace() -> None:
    assert len(filter_by_region(AGENTS, "NoRtH")) == 6
    assert filter_by_region(AGENTS, " north") == []


@pytest.mark.parametrize(
    ("region", "count", "rating", "fee"),
    [
        ("north", 6, 84.83, 7386.83),
        ("east", 4, 84.25, 8975.0),
        ("south", 6, 84.17, 7833.5),
    ],
)
def test_region_averages(region: str, count: int, rating: float, fee: float) -> None:
    averages = region_averages(AGENTS, region)
    assert averages is not None
    assert averages.agent_count == count
    assert averages.average_rating == rating
    assert averages.average_fee == fee


def test_region_averages_keeps_requested_spelling() -> None:
    averages = region_averages(AGENTS, "East")
    assert averages is not None
    assert averages.to_dict()["region"] == "East"


def test_region_averages_unknown_region_is_none() -> None:
    assert region_averages(AGENTS, "west") is None
    assert region_averages((), "north") is None


def test_blank_rating_and_fee_count_as_zero() -> None:
    agents = (
        AgentRecord("A", "One", "a@x", "west", "90", "1000"),
        AgentRecord("B", "Two", "b@x", "west", "", ""),
    )
    averages = region_averages(agents, "west")
    assert averages is not None
    assert averages.average_rating == 45.0
    assert averages.average_fee == 500.0
