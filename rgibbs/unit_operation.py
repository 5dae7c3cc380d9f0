"""
Gibbs reactor unit operation.

Wraps the equilibrium engine in the CAPE-OPEN unit operation lifecycle:

    initialize -> validate -> calculate -> terminate

Calculations are only allowed once a thermodynamic package has been
attached and ``initialize`` has succeeded. The product is only readable
after a successful ``calculate``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from loguru import logger

from .diagnostics import LoggingObserver
from .equilibrium import minimize_gibbs
from .errors import ErrorKind, OperationResult, UnitOperationError, calculation_failed
from .material import DEFAULT_PRESSURE, DEFAULT_TEMPERATURE, MaterialState
from .thermo_model import ThermoModel


class LifecycleState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    CALCULATED = "calculated"


class GibbsReactorUnit:
    """
    Gibbs free energy reactor behind the unit operation lifecycle.

    Configuration (feed, setpoints, thermo package) is plain assignment and
    is only checked by ``validate``/``calculate``. It survives
    ``terminate`` so the unit can be re-initialised and re-run.

    The thermo package is shared, never owned: several units may hold the
    same instance.
    """

    def __init__(
        self,
        id: str = "rgibbs",
        name: str = "RGibbsReactor",
        observer: Optional[LoggingObserver] = None,
    ) -> None:
        self.id = id
        self.name = name
        self.observer = observer if observer is not None else LoggingObserver(name)

        self._initialized = False
        self._calculated = False
        self._feed = MaterialState()
        self._product: Optional[MaterialState] = None
        self._temperature = DEFAULT_TEMPERATURE  # K
        self._pressure = DEFAULT_PRESSURE  # Pa
        self._thermo: Optional[ThermoModel] = None

        self.observer.lifecycle("constructed")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        if self._thermo is None:
            raise UnitOperationError(
                ErrorKind.FailedInitialization, "no thermodynamic model attached"
            )
        self._initialized = True
        self._calculated = False
        self.observer.lifecycle("initialized")

    def validate(self) -> None:
        self._ensure_initialized()
        if not self._feed.composition:
            raise UnitOperationError(ErrorKind.InvalidArgument, "feed composition is empty")
        if self._temperature <= 0 or self._pressure <= 0:
            raise UnitOperationError(
                ErrorKind.InvalidArgument, "temperature or pressure is invalid"
            )
        self.observer.lifecycle("validation passed")

    def calculate(self) -> None:
        self._ensure_initialized()
        self._calculated = False
        try:
            self.validate()
            product = minimize_gibbs(
                self._feed,
                self._temperature,
                self._pressure,
                self._thermo,
                observer=self.observer,
            )
        except UnitOperationError:
            raise
        except Exception as exc:
            logger.warning("[{}] calculation failed: {}", self.name, exc)
            raise calculation_failed(str(exc)) from exc

        self._product = product
        self._calculated = True
        self.observer.lifecycle("calculation complete")

    def terminate(self) -> None:
        self._initialized = False
        self._calculated = False
        self.observer.lifecycle("terminated, resources released")

    # ------------------------------------------------------------------
    # Result-returning variants
    # ------------------------------------------------------------------

    def try_initialize(self) -> OperationResult:
        return self._as_result(self.initialize)

    def try_validate(self) -> OperationResult:
        return self._as_result(self.validate)

    def try_calculate(self) -> OperationResult:
        return self._as_result(self.calculate)

    def try_get_product(self) -> OperationResult:
        return self._as_result(self.get_product)

    @staticmethod
    def _as_result(call: Callable) -> OperationResult:
        try:
            return OperationResult.success(call())
        except UnitOperationError as err:
            return OperationResult.failure(err)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_feed(self, feed: MaterialState) -> None:
        self._feed = feed.copy()

    def set_thermo_package(self, package: Optional[ThermoModel]) -> None:
        self._thermo = package

    def set_temperature(self, temperature: float) -> None:
        self._temperature = temperature

    def set_pressure(self, pressure: float) -> None:
        self._pressure = pressure

    def get_product(self) -> MaterialState:
        if not self._calculated or self._product is None:
            raise UnitOperationError(
                ErrorKind.InvalidOperation, "computation not yet complete"
            )
        return self._product.copy()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def calculated(self) -> bool:
        return self._calculated

    @property
    def state(self) -> LifecycleState:
        if not self._initialized:
            return LifecycleState.UNINITIALIZED
        if self._calculated:
            return LifecycleState.CALCULATED
        return LifecycleState.READY

    @property
    def feed(self) -> MaterialState:
        return self._feed.copy()

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def pressure(self) -> float:
        return self._pressure

    @property
    def thermo_package(self) -> Optional[ThermoModel]:
        return self._thermo

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise UnitOperationError(ErrorKind.InvalidOperation, "call Initialize first")
