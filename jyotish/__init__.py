"""Sidereal (Vedic) chart derivation on top of Swiss Ephemeris."""

from __future__ import annotations

from .bodies import (
    ASTEROIDS,
    LUNAR_APOGEES,
    LUNAR_NODES,
    MAJOR_PLANETS,
    OUTER_PLANETS,
    TRADITIONAL_PLANETS,
    Planet,
)
from .engine import Jyotish
from .ephemeris import (
    CalculationFlags,
    EphemerisProvider,
    RawHouses,
    RawSample,
    SiderealMode,
    SwissEphemerisProvider,
)
from .errors import (
    CalculationError,
    EphemerisError,
    ErrorKind,
    JyotishError,
    NotInitializedError,
    ValidationError,
)
from .location import GeoLocation
from .vedic import (
    Dignity,
    HouseSystem,
    KetuPosition,
    PlanetPosition,
    VedicChart,
    VedicPlanetInfo,
    compute_vedic_chart,
)

__version__ = "0.1.0"

__all__ = [
    "ASTEROIDS",
    "CalculationError",
    "CalculationFlags",
    "Dignity",
    "EphemerisError",
    "EphemerisProvider",
    "ErrorKind",
    "GeoLocation",
    "HouseSystem",
    "Jyotish",
    "JyotishError",
    "KetuPosition",
    "LUNAR_APOGEES",
    "LUNAR_NODES",
    "MAJOR_PLANETS",
    "NotInitializedError",
    "OUTER_PLANETS",
    "Planet",
    "PlanetPosition",
    "RawHouses",
    "RawSample",
    "SiderealMode",
    "SwissEphemerisProvider",
    "TRADITIONAL_PLANETS",
    "ValidationError",
    "VedicChart",
    "VedicPlanetInfo",
    "__version__",
    "compute_vedic_chart",
]
