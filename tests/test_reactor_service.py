"""Tests for the host service and the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from rgibbs import schemas
from rgibbs.main import app
from rgibbs.reactor_service import ReactorService, build_thermo_model
from rgibbs.thermo_model import IdealGasGibbsModel, MoleFractionModel


def _payload(**overrides):
    data = {
        "name": "R-101",
        "feed": {
            "name": "Feed",
            "composition": {"A": 1.0, "B": 2.0},
            "temperature_k": 300.0,
            "pressure_pa": 101325.0,
        },
        "temperature_c": 226.85,
        "pressure_kpa": 200.0,
        "thermo": {"package": "mole-fraction"},
    }
    data.update(overrides)
    return schemas.ReactorPayload(**data)


@pytest.fixture
def service():
    return ReactorService()


@pytest.fixture
def client():
    return TestClient(app)


class TestReactorService:
    def test_run_converts_host_units(self, service):
        result = service.run(_payload())

        assert result.status == "converged"
        assert result.product.temperature_k == pytest.approx(500.0)
        assert result.product.pressure_pa == pytest.approx(200000.0)
        assert sum(result.product.composition.values()) == pytest.approx(3.0)
        assert result.iterations == 20
        assert result.gibbs_energy == pytest.approx(3000.0)

    def test_missing_setpoints_fall_back_to_feed(self, service):
        result = service.run(_payload(temperature_c=None, pressure_kpa=None))
        assert result.product.temperature_k == 300.0
        assert result.product.pressure_pa == 101325.0

    def test_empty_feed_reports_invalid_argument(self, service):
        payload = _payload(feed={"name": "Feed", "composition": {}})
        result = service.run(payload)
        assert result.status == "error"
        assert result.error_kind == "InvalidArgument"
        assert result.product is None

    def test_unresolvable_package_reports_failed_initialization(self, service):
        payload = _payload(
            feed={"composition": {"not-a-real-compound-xyz": 1.0}},
            thermo={"package": "ideal-gas"},
        )
        result = service.run(payload)
        assert result.error_kind == "FailedInitialization"
        assert any("thermo package" in w for w in result.warnings)

    def test_thermo_models_are_shared(self, service):
        config = schemas.ThermoConfig(package="mole-fraction")
        first = service.thermo_model(config, ["A", "B"])
        second = service.thermo_model(config, ["A", "B"])
        assert first is second

    def test_build_unit_configures_without_initializing(self, service):
        warnings = []
        unit, _ = service.build_unit(_payload(), warnings)
        assert not unit.initialized
        assert unit.temperature == pytest.approx(500.0)
        assert isinstance(unit.thermo_package, MoleFractionModel)


def test_build_thermo_model_defaults_to_feed_species():
    model = build_thermo_model(schemas.ThermoConfig(), ["methane", "water"])
    assert isinstance(model, IdealGasGibbsModel)
    assert model.component_names == ["methane", "water"]


class TestApi:
    def test_healthz(self, client):
        assert client.get("/healthz").json() == {"status": "ok"}

    def test_calculate(self, client):
        response = client.post("/reactor/calculate", json=_payload().model_dump())
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "converged"
        assert body["product"]["composition"]["A"] > 0

    def test_invalid_argument_maps_to_422(self, client):
        payload = _payload(feed={"composition": {}}).model_dump()
        response = client.post("/reactor/calculate", json=payload)
        assert response.status_code == 422
        assert response.json()["detail"]["kind"] == "InvalidArgument"

    def test_calculation_failure_maps_to_500(self, client):
        payload = _payload(feed={"composition": {"A": 0.0}}).model_dump()
        response = client.post("/reactor/calculate", json=payload)
        assert response.status_code == 500
        assert response.json()["detail"] == {
            "kind": "CalculationFailed",
            "message": "invalid total moles",
        }
