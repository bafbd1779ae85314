"""Maintenance tickets: repairs to items somewhere in the building."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

POOR_HOURS = 3
FAIR_HOURS = 2
GOOD_HOURS = 1

HR_FACTOR = 2
FINANCE_FACTOR = 3
SALES_FACTOR = 1
MARKETING_FACTOR = 1
RESEARCH_FACTOR = 1

_STATE_HOURS = {
    "RUIM": POOR_HOURS,
    "REGULAR": FAIR_HOURS,
    "BOM": GOOD_HOURS,
}

_SECTOR_FACTORS = {
    "RH": HR_FACTOR,
    "FINANCEIRO": FINANCE_FACTOR,
    "VENDAS": SALES_FACTOR,
    "MARKETING": MARKETING_FACTOR,
    "P&D": RESEARCH_FACTOR,
}


@dataclass
class Maintenance:
    """A request to repair an item, estimated from its condition and the requester's sector."""

    name: str
    state: str
    location: str
    sector: Optional[str]
    _estimated_time: int = field(default=0, init=False, repr=False)

    def __post_init__(self):
        if self.sector is None:
            raise ValueError("a maintenance request needs the requester's sector")
        hours = _STATE_HOURS.get(self.state)
        factor = _SECTOR_FACTORS.get(self.sector)
        if hours is not None and factor is not None:
            self._estimated_time = hours * factor

    def estimated_time(self):
        """Hours estimated to resolve the request."""
        return self._estimated_time

    def kind(self):
        """'M' for maintenance."""
        return "M"

    def describe(self):
        """Return the request's details as report lines."""
        return (
            "- Tipo: Manutencao\n"
            f"- Nome do item: {self.name}\n"
            f"- Estado de conservacao: {self.state}\n"
            f"- Local: {self.location}\n"
            f"- Tempo estimado: {self._estimated_time}h\n"
        )


def read_maintenance(scanner, sector):
    """Read item name, condition and location; the sector comes from the requester."""
    name = scanner.read_rest_of_line()
    state = scanner.read_line()
    location = scanner.read_line()
    return Maintenance(name, state, location, sector)