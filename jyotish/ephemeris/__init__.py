"""Ephemeris providers and request options."""

from __future__ import annotations

from .flags import CalculationFlags
from .paths import get_se_ephe_path
from .provider import EphemerisProvider, RawHouses, RawSample
from .sidereal import (
    DEFAULT_SIDEREAL_MODE,
    SIDEREAL_MODES,
    SiderealMode,
    resolve_sidereal_mode,
)
from .swisseph_provider import SwissEphemerisProvider

__all__ = [
    "CalculationFlags",
    "DEFAULT_SIDEREAL_MODE",
    "EphemerisProvider",
    "RawHouses",
    "RawSample",
    "SIDEREAL_MODES",
    "SiderealMode",
    "SwissEphemerisProvider",
    "get_se_ephe_path",
    "resolve_sidereal_mode",
]
