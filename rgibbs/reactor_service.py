"""
Host-side driver for the Gibbs reactor.

Turns a ``ReactorPayload`` into a fully configured ``GibbsReactorUnit``,
walks it through the lifecycle and converts the outcome to a
``ReactorResult``. Thermo packages are cached per configuration and shared
between every unit the service builds.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from loguru import logger

from . import schemas
from .diagnostics import RecordingObserver
from .errors import UnitOperationError
from .thermo_model import IdealGasGibbsModel, MoleFractionModel, ThermoModel
from .unit_operation import GibbsReactorUnit

_ModelKey = Tuple[str, Tuple[str, ...], float]


def build_thermo_model(config: schemas.ThermoConfig, species: List[str]) -> ThermoModel:
    """Create the thermo package named by ``config``.

    ``species`` is used as the component list when the config lists none.
    """
    if config.package == "mole-fraction":
        return MoleFractionModel()
    components = config.components or species
    return IdealGasGibbsModel(components, reference_pressure=config.reference_pressure_pa)


class ReactorService:
    def __init__(self) -> None:
        self._models: Dict[_ModelKey, ThermoModel] = {}

    def thermo_model(self, config: schemas.ThermoConfig, species: List[str]) -> ThermoModel:
        components = tuple(config.components or species)
        key = (config.package, components, config.reference_pressure_pa)
        model = self._models.get(key)
        if model is None:
            model = build_thermo_model(config, list(components))
            self._models[key] = model
        return model

    def build_unit(
        self, payload: schemas.ReactorPayload, warnings: List[str]
    ) -> Tuple[GibbsReactorUnit, RecordingObserver]:
        observer = RecordingObserver(payload.name)
        unit = GibbsReactorUnit(id=payload.name, name=payload.name, observer=observer)

        feed = payload.feed.to_state()
        unit.set_feed(feed)

        # Host units: °C / kPa, falling back to the feed's conditions
        T = payload.temperature_c + 273.15 if payload.temperature_c is not None else feed.temperature
        P = payload.pressure_kpa * 1000.0 if payload.pressure_kpa is not None else feed.pressure
        unit.set_temperature(T)
        unit.set_pressure(P)

        model: Optional[ThermoModel] = None
        try:
            model = self.thermo_model(payload.thermo, list(feed.composition))
        except ValueError as exc:
            warnings.append(f"Failed to build thermo package: {exc}")
            logger.warning("Thermo package for '{}' unavailable: {}", payload.name, exc)
        unit.set_thermo_package(model)
        return unit, observer

    def run(self, payload: schemas.ReactorPayload) -> schemas.ReactorResult:
        warnings: List[str] = []
        unit, observer = self.build_unit(payload, warnings)

        try:
            unit.initialize()
            unit.calculate()
            product = unit.get_product()
        except UnitOperationError as err:
            return schemas.ReactorResult(
                name=payload.name,
                status="error",
                error_kind=err.kind.name,
                error_message=err.message,
                warnings=warnings,
            )
        finally:
            unit.terminate()

        return schemas.ReactorResult(
            name=payload.name,
            status="converged",
            product=schemas.MaterialStateModel.from_state(product),
            gibbs_energy=observer.gibbs_energy,
            iterations=len(observer.iterations),
            warnings=warnings,
        )
