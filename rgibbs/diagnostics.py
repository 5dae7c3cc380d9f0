"""Loguru-backed diagnostics for the reactor lifecycle and engine."""

from __future__ import annotations

import sys
from typing import Dict, List, Mapping, Optional, Tuple

from loguru import logger

from .material import MaterialState

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[unit]}</cyan> | {message}"
)


def configure_logging(level: str = "INFO") -> None:
    """Install a single stderr sink in the service format."""
    logger.remove()
    logger.configure(extra={"unit": "-"})
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


class LoggingObserver:
    """Reports lifecycle transitions and engine checkpoints through loguru."""

    def __init__(self, unit_name: str) -> None:
        self.unit_name = unit_name
        self._log = logger.bind(unit=unit_name)

    def lifecycle(self, message: str) -> None:
        self._log.info("[{}] {}", self.unit_name, message)

    def on_iteration(self, iteration: int, composition: Mapping[str, float], lam: float) -> None:
        self._log.debug(
            "[{}] iteration {}: lambda={:.6g} composition={}",
            self.unit_name,
            iteration + 1,
            lam,
            dict(composition),
        )

    def on_complete(self, product: MaterialState, gibbs_energy: float) -> None:
        self._log.info("[{}] iterations complete, Gibbs={:.6f}", self.unit_name, gibbs_energy)


class RecordingObserver(LoggingObserver):
    """Keeps engine checkpoints in memory so hosts can report them."""

    def __init__(self, unit_name: str) -> None:
        super().__init__(unit_name)
        self.iterations: List[Tuple[int, float, Dict[str, float]]] = []
        self.gibbs_energy: Optional[float] = None

    def on_iteration(self, iteration: int, composition: Mapping[str, float], lam: float) -> None:
        super().on_iteration(iteration, composition, lam)
        self.iterations.append((iteration, lam, dict(composition)))

    def on_complete(self, product: MaterialState, gibbs_energy: float) -> None:
        super().on_complete(product, gibbs_energy)
        self.gibbs_energy = gibbs_energy
