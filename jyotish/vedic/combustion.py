"""Combustion (asta) of planets close to the Sun."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from ..bodies import Planet
from ..zodiac import signed_separation

__all__ = [
    "COMBUSTION_THRESHOLDS",
    "DEFAULT_COMBUSTION_THRESHOLD",
    "combustion_threshold",
    "is_combust",
]

# Orbs in degrees of ecliptic longitude.
COMBUSTION_THRESHOLDS: Final[Mapping[Planet, float]] = MappingProxyType(
    {
        Planet.MOON: 12.0,
        Planet.MERCURY: 14.0,
        Planet.VENUS: 10.0,
        Planet.MARS: 17.0,
        Planet.JUPITER: 11.0,
        Planet.SATURN: 15.0,
    }
)

DEFAULT_COMBUSTION_THRESHOLD: Final[float] = 10.0


def combustion_threshold(planet: Planet) -> float:
    return COMBUSTION_THRESHOLDS.get(planet, DEFAULT_COMBUSTION_THRESHOLD)


def is_combust(planet: Planet, planet_longitude: float, sun_longitude: float) -> bool:
    """Return ``True`` when ``planet`` lies strictly inside its orb of the Sun.

    The Sun itself is never combust. Separation is measured the short way
    round the circle, so 355 and 5 degrees are ten degrees apart.
    """

    if planet is Planet.SUN:
        return False
    separation = abs(signed_separation(planet_longitude, sun_longitude))
    return separation < combustion_threshold(planet)
