"""Prometheus metric definitions shared across the chart engine."""

from __future__ import annotations

from collections.abc import Iterable

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

__all__ = [
    "CHART_COMPUTE_DURATION",
    "COMPUTE_ERRORS",
    "EPHEMERIS_CALL_DURATION",
    "ensure_metrics_registered",
]


CHART_COMPUTE_DURATION = Histogram(
    "jyotish_chart_compute_duration_seconds",
    "Duration of full Vedic chart assembly.",
    ("house_system",),
    registry=None,
)

EPHEMERIS_CALL_DURATION = Histogram(
    "jyotish_ephemeris_call_duration_seconds",
    "Duration of individual ephemeris provider calls.",
    ("provider", "call"),
    registry=None,
)

COMPUTE_ERRORS = Counter(
    "jyotish_compute_errors_total",
    "Count of runtime failures across chart computations.",
    ("component", "error"),
    registry=None,
)


def _iter_metrics() -> Iterable[Counter | Histogram]:
    yield CHART_COMPUTE_DURATION
    yield EPHEMERIS_CALL_DURATION
    yield COMPUTE_ERRORS


def ensure_metrics_registered(
    registry: CollectorRegistry | None = None,
) -> None:
    """Register shared metrics with ``registry`` if not already present."""

    target = registry or REGISTRY
    for metric in _iter_metrics():
        try:
            target.register(metric)
        except ValueError:
            # Prometheus raises when a metric name already exists in the registry.
            continue
