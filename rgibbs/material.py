"""Material state carried on the reactor's feed and product ports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

# Defaults match the CAPE-OPEN material port convention
DEFAULT_TEMPERATURE = 298.15  # K
DEFAULT_PRESSURE = 101325.0  # Pa


@dataclass
class MaterialState:
    """Snapshot of a stream: per-species molar amounts at T, P."""

    name: str = ""
    # Species id -> molar amount (mol). Insertion order is iteration order.
    composition: Dict[str, float] = field(default_factory=dict)
    temperature: float = DEFAULT_TEMPERATURE  # K
    pressure: float = DEFAULT_PRESSURE  # Pa

    @property
    def total_moles(self) -> float:
        total = 0.0
        for amount in self.composition.values():
            total += amount
        return total

    def mole_fractions(self) -> Dict[str, float]:
        total = self.total_moles
        if total <= 0:
            return {species: 0.0 for species in self.composition}
        return {species: amount / total for species, amount in self.composition.items()}

    def copy(self) -> "MaterialState":
        return MaterialState(
            name=self.name,
            composition=dict(self.composition),
            temperature=self.temperature,
            pressure=self.pressure,
        )
