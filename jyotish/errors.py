"""Error taxonomy shared by the chart engine and its providers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

__all__ = [
    "ErrorKind",
    "JyotishError",
    "NotInitializedError",
    "CalculationError",
    "ValidationError",
    "EphemerisError",
]


class ErrorKind(StrEnum):
    """Broad failure categories surfaced to callers."""

    NOT_INITIALIZED = "not_initialized"
    CALCULATION_FAILURE = "calculation_failure"
    VALIDATION_FAILURE = "validation_failure"


class JyotishError(Exception):
    """Base error carrying an :class:`ErrorKind` and optional context."""

    kind: ErrorKind = ErrorKind.CALCULATION_FAILURE

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.context = dict(context or {})

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} (caused by {self.cause.__class__.__name__}: {self.cause})"


class NotInitializedError(JyotishError):
    """Raised when a calculation is requested before the provider is ready."""

    kind = ErrorKind.NOT_INITIALIZED


class CalculationError(JyotishError):
    """Raised when an ephemeris request fails inside a calculation."""

    kind = ErrorKind.CALCULATION_FAILURE


class ValidationError(JyotishError, ValueError):
    """Raised for malformed caller input such as an out-of-range location."""

    kind = ErrorKind.VALIDATION_FAILURE


class EphemerisError(RuntimeError):
    """Low-level failure reported by an ephemeris backend."""

    def __init__(
        self,
        message: str,
        *,
        body: str | None = None,
        julian_day: float | None = None,
        error_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.body = body
        self.julian_day = julian_day
        self.error_code = error_code
