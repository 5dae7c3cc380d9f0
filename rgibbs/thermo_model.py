"""
Thermodynamic model interface consumed by the Gibbs reactor.

The reactor only ever asks two questions of a property package: the
per-species chemical potential and the total Gibbs energy of a material
state. ``IdealGasGibbsModel`` answers them from standard-state formation
data supplied by Caleb Bell's ``thermo``/``chemicals`` libraries.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Dict, List

import numpy as np
from chemicals import identifiers
from loguru import logger
from thermo import ChemicalConstantsPackage

from .material import MaterialState

R_GAS = 8.314462618  # J/(mol·K)
P_REF = 101325.0  # Pa


class ThermoModel(ABC):
    """Property package as seen by the unit operation.

    Both queries are pure functions of ``state``. They may raise for
    non-physical states; the reactor wraps such failures.
    """

    @abstractmethod
    def chemical_potential(self, state: MaterialState) -> Dict[str, float]:
        """Chemical potential per species (J/mol)."""

    @abstractmethod
    def gibbs_energy(self, state: MaterialState) -> float:
        """Total Gibbs energy of the state (J)."""


class MoleFractionModel(ThermoModel):
    """Linear placeholder package: mu_i = x_i, G = 1000 * total moles."""

    def chemical_potential(self, state: MaterialState) -> Dict[str, float]:
        return state.mole_fractions()

    def gibbs_energy(self, state: MaterialState) -> float:
        return state.total_moles * 1000.0


class IdealGasGibbsModel(ThermoModel):
    """
    Ideal-gas mixture with standard-state formation properties.

    mu_i = Hf_i - T*S0_i + R*T*ln(x_i * P / P0)

    Species not in ``component_names`` are left out of the potential
    mapping but still count towards the mixture total.
    """

    # Underscore spellings hosts tend to send
    _COMPOUND_ALIASES: Dict[str, str] = {
        "carbon_monoxide": "carbon monoxide",
        "carbon_dioxide": "carbon dioxide",
        "hydrogen_sulfide": "hydrogen sulfide",
        "sulfur_dioxide": "sulfur dioxide",
        "nitric_oxide": "nitric oxide",
        "nitrogen_dioxide": "nitrogen dioxide",
    }

    def __init__(
        self,
        component_names: List[str],
        reference_pressure: float = P_REF,
    ) -> None:
        if not component_names:
            raise ValueError("At least one component is required")
        if reference_pressure <= 0:
            raise ValueError("Reference pressure must be positive")

        self.component_names = list(component_names)
        self.reference_pressure = reference_pressure
        self.n = len(component_names)

        logger.info("Initialising IdealGasGibbsModel: components={}", component_names)

        self.cas_numbers = self._resolve_cas(self.component_names)
        constants, _ = ChemicalConstantsPackage.from_IDs(self.cas_numbers)

        # Missing formation data counts as zero
        self.Hf = np.array([h if h is not None else 0.0 for h in constants.Hfgs], dtype=float)
        self.S0 = np.array([s if s is not None else 0.0 for s in constants.S0gs], dtype=float)

    @classmethod
    def _resolve_cas(cls, names: List[str]) -> List[str]:
        """Resolve chemical names to CAS registry numbers."""
        cas_list: List[str] = []
        for name in names:
            normalized = cls._COMPOUND_ALIASES.get(name.lower().strip(), name)
            try:
                cas_list.append(identifiers.CAS_from_any(normalized))
            except Exception as exc:
                raise ValueError(
                    f"Could not resolve compound '{name}'. "
                    "Use IUPAC or common names (e.g. 'water', 'methane', 'hydrogen')."
                ) from exc
        return cas_list

    def _standard_potentials(self, T: float) -> np.ndarray:
        return self.Hf - T * self.S0

    def _check_conditions(self, state: MaterialState) -> None:
        if state.temperature <= 0 or state.pressure <= 0:
            raise ValueError(
                f"Non-physical state T={state.temperature} K, P={state.pressure} Pa"
            )

    def chemical_potential(self, state: MaterialState) -> Dict[str, float]:
        self._check_conditions(state)
        T = state.temperature
        total = state.total_moles
        mu0 = self._standard_potentials(T)

        mu: Dict[str, float] = {}
        for i, name in enumerate(self.component_names):
            if name not in state.composition:
                continue
            xi = state.composition[name] / total if total > 0 else 0.0
            activity = max(xi * state.pressure / self.reference_pressure, 1e-30)
            mu[name] = float(mu0[i] + R_GAS * T * math.log(activity))
        return mu

    def gibbs_energy(self, state: MaterialState) -> float:
        mu = self.chemical_potential(state)
        G_total = 0.0
        for name, mu_i in mu.items():
            n_i = state.composition[name]
            if n_i <= 1e-30:
                continue
            G_total += n_i * mu_i
        return G_total
