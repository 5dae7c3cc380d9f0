"""
Fixed-step Gibbs energy relaxation.

A simplified gradient-style scheme: each species' amount is pushed down by
``STEP_SIZE * (mu_i - lambda)``, where lambda is the mean chemical
potential, clamped at zero and then rescaled so total moles are conserved.
There is no convergence test; exactly ``ITERATIONS`` steps are taken so
the output is reproducible for a deterministic property package.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Protocol

from .errors import calculation_failed
from .material import MaterialState
from .thermo_model import ThermoModel

STEP_SIZE = 0.1
ITERATIONS = 20


class EquilibriumObserver(Protocol):
    def on_iteration(self, iteration: int, composition: Mapping[str, float], lam: float) -> None:
        ...

    def on_complete(self, product: MaterialState, gibbs_energy: float) -> None:
        ...


def _sum(values) -> float:
    # Sequential summation keeps results bit-reproducible
    total = 0.0
    for v in values:
        total += v
    return total


def mean_potential(mu: Mapping[str, float]) -> float:
    """Reference potential lambda: mean over the entries ``mu`` contains."""
    return _sum(mu.values()) / len(mu)


def relax_composition(
    composition: Mapping[str, float],
    mu: Mapping[str, float],
    total_moles: float,
) -> Dict[str, float]:
    """
    One relaxation step. Returns a new composition; ``composition`` is
    left untouched.

    Species missing from ``mu`` keep their amount through the update and
    are only affected by the final rescale.
    """
    lam = mean_potential(mu)

    updated: Dict[str, float] = {}
    for species, amount in composition.items():
        if species in mu:
            delta = STEP_SIZE * (mu[species] - lam)
            amount = max(0.0, amount - delta)
        updated[species] = amount

    new_total = _sum(updated.values())
    if new_total <= 0:
        raise calculation_failed("iteration produced invalid composition")

    scale = total_moles / new_total
    return {species: amount * scale for species, amount in updated.items()}


def minimize_gibbs(
    feed: MaterialState,
    temperature: float,
    pressure: float,
    model: ThermoModel,
    observer: Optional[EquilibriumObserver] = None,
) -> MaterialState:
    """
    Relax ``feed`` toward lower Gibbs energy at ``temperature``/``pressure``.

    Raises ``UnitOperationError(CalculationFailed)`` for non-positive total
    moles. Exceptions from ``model`` propagate unchanged.
    """
    product = feed.copy()
    product.temperature = temperature
    product.pressure = pressure

    total_moles = product.total_moles
    if total_moles <= 0:
        raise calculation_failed("invalid total moles")

    mu = model.chemical_potential(product)

    for iteration in range(ITERATIONS):
        lam = mean_potential(mu)
        product.composition = relax_composition(product.composition, mu, total_moles)
        if observer is not None:
            observer.on_iteration(iteration, product.composition, lam)
        mu = model.chemical_potential(product)

    gibbs = model.gibbs_energy(product)
    if observer is not None:
        observer.on_complete(product, gibbs)

    return product
