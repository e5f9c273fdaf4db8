# This file defines the value objects passed in and out of the quote calculator.
# Both records are frozen; a quote is computed per call and never stored.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class QuoteRequest:
    apartments: int
    floors: int
    tier: str


@dataclass(frozen=True)
class QuoteResult:
    elevators_required: int
    total_cost: float
    tier: str
    apartments_per_floor: float
    elevators_per_column: int
    columns: int
    unit_price: float
    install_rate: float
    total_unit_cost: float
    total_install_cost: float

    def breakdown(self) -> dict[str, Any]:
        return {
            "apartments_per_floor": self.apartments_per_floor,
            "elevators_per_column": self.elevators_per_column,
            "columns": self.columns,
            "unit_price": self.unit_price,
            "install_rate": self.install_rate,
            "total_unit_cost": self.total_unit_cost,
            "total_install_cost": self.total_install_cost,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "elevators_required": self.elevators_required,
            "total_cost": self.total_cost,
            "tier": self.tier,
            "breakdown": self.breakdown(),
        }
