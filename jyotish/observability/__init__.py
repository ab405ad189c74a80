"""Runtime observability primitives for the chart engine."""

from __future__ import annotations

from .metrics import (
    CHART_COMPUTE_DURATION,
    COMPUTE_ERRORS,
    EPHEMERIS_CALL_DURATION,
    ensure_metrics_registered,
)

__all__ = [
    "CHART_COMPUTE_DURATION",
    "COMPUTE_ERRORS",
    "EPHEMERIS_CALL_DURATION",
    "ensure_metrics_registered",
]
