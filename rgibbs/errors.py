"""
Error taxonomy for the Gibbs reactor unit operation.

Mirrors the CAPE-OPEN error table: a single exception type carrying an
error kind and a human-readable message. Hosts that prefer not to catch
exceptions can use the ``OperationResult`` returned by the ``try_*``
lifecycle variants instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class ErrorKind(IntEnum):
    """CAPE-OPEN style error codes."""

    NoError = 0
    UnknownError = 1
    InvalidArgument = 2
    InvalidOperation = 3
    FailedInitialization = 4
    CalculationFailed = 5


class UnitOperationError(Exception):
    """Domain error raised by the unit operation lifecycle and engine."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"


@dataclass
class OperationResult:
    """Outcome of a lifecycle call, discriminated by ``kind``."""

    kind: ErrorKind = ErrorKind.NoError
    message: str = ""
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.kind == ErrorKind.NoError

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: UnitOperationError) -> "OperationResult":
        return cls(kind=error.kind, message=error.message)

    def unwrap(self) -> Any:
        """Return ``value`` or re-raise the recorded error."""
        if not self.ok:
            raise UnitOperationError(self.kind, self.message)
        return self.value


def calculation_failed(message: str) -> UnitOperationError:
    return UnitOperationError(ErrorKind.CalculationFailed, message)
