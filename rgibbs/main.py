from __future__ import annotations

import os
from typing import Dict

from fastapi import FastAPI, HTTPException

from . import schemas
from .diagnostics import configure_logging
from .reactor_service import ReactorService

configure_logging(os.environ.get("RGIBBS_LOG_LEVEL", "INFO"))

app = FastAPI(title="RGibbs Reactor API", version="0.1.0")
service = ReactorService()

_STATUS_BY_KIND: Dict[str, int] = {
    "InvalidArgument": 422,
    "InvalidOperation": 409,
    "FailedInitialization": 500,
    "CalculationFailed": 500,
}


@app.get("/healthz")
def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/reactor/calculate", response_model=schemas.ReactorResult)
def calculate_reactor(payload: schemas.ReactorPayload) -> schemas.ReactorResult:
    result = service.run(payload)
    if result.status == "error":
        raise HTTPException(
            status_code=_STATUS_BY_KIND.get(result.error_kind, 500),
            detail={"kind": result.error_kind, "message": result.error_message},
        )
    return result
