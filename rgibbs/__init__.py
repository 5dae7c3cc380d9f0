"""Gibbs free energy reactor exposed through the CAPE-OPEN unit operation lifecycle."""

from .equilibrium import ITERATIONS, STEP_SIZE, minimize_gibbs, relax_composition
from .errors import ErrorKind, OperationResult, UnitOperationError
from .material import MaterialState
from .thermo_model import IdealGasGibbsModel, MoleFractionModel, ThermoModel
from .unit_operation import GibbsReactorUnit, LifecycleState

__all__ = [
    "ErrorKind",
    "GibbsReactorUnit",
    "IdealGasGibbsModel",
    "ITERATIONS",
    "LifecycleState",
    "MaterialState",
    "MoleFractionModel",
    "OperationResult",
    "STEP_SIZE",
    "ThermoModel",
    "UnitOperationError",
    "minimize_gibbs",
    "relax_composition",
]
