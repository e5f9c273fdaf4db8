# This file defines the residential pricing tiers used by the quote calculator.
# The tier table is built once at startup and exposed as a read-only mapping.
# Defaults live in code; an optional YAML file can replace them for a deployment.

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

logger = logging.getLogger(__name__)

PricingTable = Mapping[str, "PricingTier"]


@dataclass(frozen=True)
class PricingTier:
    name: str
    unit_price: float
    install_rate: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Pricing tier name must not be empty.")
        if self.unit_price <= 0:
            raise ValueError(f"unit_price for tier {self.name!r} must be greater than 0.")
        if not 0.0 <= self.install_rate <= 1.0:
            raise ValueError(f"install_rate for tier {self.name!r} must be between 0 and 1.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "unit_price": self.unit_price,
            "install_rate": self.install_rate,
        }


def build_pricing_table(tiers: list[PricingTier] | tuple[PricingTier, ...]) -> PricingTable:
    """Index tiers by name and freeze the result."""

    table: dict[str, PricingTier] = {}
    for tier in tiers:
        if tier.name in table:
            raise ValueError(f"Duplicate pricing tier: {tier.name!r}")
        table[tier.name] = tier
    if not table:
        raise ValueError("Pricing table must define at least one tier.")
    return MappingProxyType(table)


DEFAULT_PRICING_TABLE: PricingTable = build_pricing_table(
    (
        PricingTier(name="standard", unit_price=7565, install_rate=0.10),
        PricingTier(name="premium", unit_price=12345, install_rate=0.13),
        PricingTier(name="excelium", unit_price=15400, install_rate=0.16),
    )
)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def _tier_from_mapping(name: str, raw: Any) -> PricingTier:
    if not isinstance(raw, dict):
        raise ValueError(f"Tier {name!r} must be a mapping with unit_price and install_rate.")
    missing = [key for key in ("unit_price", "install_rate") if key not in raw]
    if missing:
        raise ValueError(f"Tier {name!r} is missing keys: {', '.join(missing)}")
    return PricingTier(
        name=str(name),
        unit_price=float(raw["unit_price"]),
        install_rate=float(raw["install_rate"]),
    )


def load_pricing_table(*, config_path: str | Path | None = "configs/pricing_tiers.yaml") -> PricingTable:
    """Load the tier table from YAML, falling back to the built-in defaults."""

    if config_path is None:
        return DEFAULT_PRICING_TABLE

    path = Path(config_path)
    if not path.exists():
        logger.info("Pricing config %s not found, using default tiers", path)
        return DEFAULT_PRICING_TABLE

    cfg = _load_yaml(path)
    raw_tiers = cfg.get("tiers")
    if not isinstance(raw_tiers, dict) or not raw_tiers:
        raise ValueError(f"Config at {path} must define a non-empty 'tiers' mapping.")

    table = build_pricing_table([_tier_from_mapping(name, raw) for name, raw in raw_tiers.items()])
    logger.info("Loaded %d pricing tiers from %s", len(table), path)
    return table
