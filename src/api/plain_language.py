# This file turns quote and directory results into short plain-language sentences.
# It exists so front-ends can show a readable summary next to the machine fields.
# The wording is deterministic and derived only from the numbers it describes.

from __future__ import annotations

from src.directory.region_stats import RegionAverages
from src.quoting.models import QuoteResult


def _plural(count: int, singular: str, plural: str | None = None) -> str:
    word = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {word}"


def format_money(amount: float) -> str:
    return f"${amount:,.2f}"


def quote_summary(result: QuoteResult) -> str:
    """Describe a residential quote in one sentence."""

    elevators = _plural(result.elevators_required, "elevator")
    columns = _plural(result.columns, "column")
    return (
        f"{elevators} across {columns} at the {result.tier} tier "
        f"for a total of {format_money(result.total_cost)} including installation."
    )


def region_summary(averages: RegionAverages) -> str:
    agents = _plural(averages.agent_count, "agent")
    return (
        f"{agents} in {averages.region} with an average rating of "
        f"{averages.average_rating:g} and an average fee of {format_money(averages.average_fee)}."
    )
