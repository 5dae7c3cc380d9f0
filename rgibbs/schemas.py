from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .material import DEFAULT_PRESSURE, DEFAULT_TEMPERATURE, MaterialState


class MaterialStateModel(BaseModel):
    name: str = ""
    composition: Dict[str, float] = Field(default_factory=dict)
    temperature_k: float = DEFAULT_TEMPERATURE
    pressure_pa: float = DEFAULT_PRESSURE

    def to_state(self) -> MaterialState:
        return MaterialState(
            name=self.name,
            composition=dict(self.composition),
            temperature=self.temperature_k,
            pressure=self.pressure_pa,
        )

    @classmethod
    def from_state(cls, state: MaterialState) -> "MaterialStateModel":
        return cls(
            name=state.name,
            composition=dict(state.composition),
            temperature_k=state.temperature,
            pressure_pa=state.pressure,
        )


class ThermoConfig(BaseModel):
    package: Literal["ideal-gas", "mole-fraction"] = "ideal-gas"
    components: List[str] = Field(default_factory=list)
    reference_pressure_pa: float = 101325.0


class ReactorPayload(BaseModel):
    name: str = Field(default="RGibbsReactor")
    feed: MaterialStateModel
    temperature_c: Optional[float] = None
    pressure_kpa: Optional[float] = None
    thermo: ThermoConfig = Field(default_factory=ThermoConfig)


class ReactorResult(BaseModel):
    name: str
    status: str = "not-run"
    product: Optional[MaterialStateModel] = None
    gibbs_energy: Optional[float] = None
    iterations: int = 0
    error_kind: Optional[str] = None
    error_message: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)
