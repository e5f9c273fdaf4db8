# This test file covers the pricing tier table and its YAML loader.

from __future__ import annotations

from pathlib import Path

import pytest

from src.quoting.pricing_tiers import (
    DEFAULT_PRICING_TABLE,
    PricingTier,
    build_pricing_table,
    load_pricing_table,
)

ROOT_DIR = Path(__file__).resolve().parents[2]


def test_default_table_has_fixed_tiers() -> None:
    assert list(DEFAULT_PRICING_TABLE) == ["standard", "premium", "excelium"]
    assert DEFAULT_PRICING_TABLE["standard"] == PricingTier("standard", 7565, 0.10)
    assert DEFAULT_PRICING_TABLE["premium"] == PricingTier("premium", 12345, 0.13)
    assert DEFAULT_PRICING_TABLE["excelium"] == PricingTier("excelium", 15400, 0.16)


def test_shipped_config_matches_defaults() -> None:
    table = load_pricing_table(config_path=ROOT_DIR / "configs" / "pricing_tiers.yaml")
    assert dict(table) == dict(DEFAULT_PRICING_TABLE)


def test_missing_config_falls_back_to_defaults(tmp_path: Path) -> None:
    assert load_pricing_table(config_path=tmp_path / "absent.yaml") is DEFAULT_PRICING_TABLE
    assert load_pricing_table(config_path=None) is DEFAULT_PRICING_TABLE


def test_yaml_config_replaces_tiers(tmp_path: Path) -> None:
    path = tmp_path / "tiers.yaml"
    path.write_text(
        "tiers:\n  basic:\n    unit_price: 5000\n    install_rate: 0.05\n",
        encoding="utf-8",
    )
    table = load_pricing_table(config_path=path)
    assert list(table) == ["basic"]
    assert table["basic"].unit_price == 5000.0
    with pytest.raises(TypeError):
        table["other"] = table["basic"]  # type: ignore[index]


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "tiers: {}\n",
        "tiers:\n  basic:\n    unit_price: 5000\n",
        "tiers:\n  basic:\n    unit_price: 5000\n    install_rate: 1.5\n",
        "tiers:\n  basic:\n    unit_price: 0\n    install_rate: 0.1\n",
        "tiers:\n  basic: 12\n",
    ],
)
def test_malformed_config_is_rejected(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tiers.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_pricing_table(config_path=path)


def test_duplicate_tier_names_are_rejected() -> None:
    tier = PricingTier("standard", 1, 0.1)
    with pytest.raises(ValueError, match="Duplicate"):
        build_pricing_table((tier, tier))


def test_tier_to_dict() -> None:
    assert DEFAULT_PRICING_TABLE["premium"].to_dict() == {
        "name": "premium",
        "unit_price": 12345,
        "install_rate": 0.13,
    }
