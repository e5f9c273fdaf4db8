"""
Unit tests for plain-language quote and region summaries.
"""

from src.api.plain_language import format_money, quote_summary, region_summary
from src.directory.region_stats import RegionAverages
from src.quoting.calculator import compute_quote


def test_format_money_groups_thousands() -> None:
    assert format_money(35728) == "$35,728.00"
    assert format_money(13949.85) == "$13,949.85"


def test_quote_summary_uses_singular_forms() -> None:
    summary = quote_summary(compute_quote(100, 20, "premium"))
    assert summary == (
        "1 elevator across 1 column at the premium tier for a total of $13,949.85 including installation."
    )


def test_quote_summary_uses_plural_forms() -> None:
    summary = quote_summary(compute_quote(150, 30, "excelium"))
    assert summary.startswith("2 elevators across 2 columns at the excelium tier")


def test_region_summary() -> None:
    averages = RegionAverages(region="east", agent_count=4, average_rating=84.25, average_fee=8975.0)
    assert region_summary(averages) == (
        "4 agents in east with an average rating of 84.25 and an average fee of $8,975.00."
    )
