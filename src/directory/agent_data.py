"""
Static agent directory.
The table is fixed at import time and never mutated; ratings and fees keep their source string form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AgentRecord:
    first_name: str
    last_name: str
    email: str
    region: str
    rating: str
    fee: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "region": self.region,
            "rating": self.rating,
            "fee": self.fee,
        }


AGENTS: tuple[AgentRecord, ...] = (
    AgentRecord("Orlando", "Perez", "perez@rocket.elv", "north", "95", "10000"),
    AgentRecord("Brutus", "Konway", "brutus@rocket.elv", "north", "92", "9000"),
    AgentRecord("Bob", "Boberson", "bob@rocket.elv", "east", "85", "10000"),
    AgentRecord("John", "Johnson", "john@rocket.elv", "south", "75", "8000"),
    AgentRecord("Jeff", "Lebow", "carpet@rocket.elv", "north", "92", "10000"),
    AgentRecord("Elmar", "Fade", "elmar@rocket.elv", "south", "95", "10000"),
    AgentRecord("Zed", "Roles", "zebra@rocket.elv", "north", "100", "4321"),
    AgentRecord("Dee", "Omega", "omega@rocket.elv", "east", "78", "7000"),
    AgentRecord("Aaron", "De Silva", "aaron@rocket.elv", "east", "89", "8900"),
    AgentRecord("Brian", "Bossman", "papi@rocket.elv", "south", "100", "10001"),
    AgentRecord("Bob", "Robertson", "bob2@rocket.elv", "east", "85", "10000"),
    AgentRecord("George", "Cleese", "monty@rocket.elv", "south", "85", "5000"),
    AgentRecord("Tanim", "Homaini", "tanim@rocket.elv", "south", "96", "10000"),
    AgentRecord("Roger", "Babbel", "loons@rocket.elv", "north", "60", "5000"),
    AgentRecord("Zach", "Van Den Zilch", "zach@rocket.elv", "north", "70", "6000"),
    AgentRecord("Al", "Stein", "relative@rocket.elv", "south", "54", "4000"),
)
