from typing import Dict

import pytest

from rgibbs.diagnostics import RecordingObserver
from rgibbs.material import MaterialState
from rgibbs.thermo_model import MoleFractionModel, ThermoModel
from rgibbs.unit_operation import GibbsReactorUnit


class FixedPotentialModel(ThermoModel):
    """Returns the same potentials for every state."""

    def __init__(self, mu: Dict[str, float], gibbs: float = 0.0) -> None:
        self.mu = mu
        self.gibbs = gibbs
        self.potential_calls = 0

    def chemical_potential(self, state):
        self.potential_calls += 1
        return dict(self.mu)

    def gibbs_energy(self, state):
        return self.gibbs


class ExplodingModel(ThermoModel):
    def __init__(self, error: Exception) -> None:
        self.error = error

    def chemical_potential(self, state):
        raise self.error

    def gibbs_energy(self, state):
        raise self.error


@pytest.fixture
def mole_fraction_model():
    return MoleFractionModel()


@pytest.fixture
def feed():
    return MaterialState(name="Feed", composition={"A": 1.0, "B": 2.0}, temperature=300.0, pressure=101325.0)


@pytest.fixture
def observer():
    return RecordingObserver("test-reactor")


@pytest.fixture
def reactor(mole_fraction_model, feed, observer):
    """Configured but not yet initialised reactor at 500 K / 2 bar."""
    unit = GibbsReactorUnit(id="rgibbs-1", name="test-reactor", observer=observer)
    unit.set_thermo_package(mole_fraction_model)
    unit.set_feed(feed)
    unit.set_temperature(500.0)
    unit.set_pressure(2e5)
    return unit
