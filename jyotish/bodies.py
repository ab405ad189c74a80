"""Planet catalogue and Swiss Ephemeris body identifiers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Final

__all__ = [
    "Planet",
    "SWE_BODY_IDS",
    "TRADITIONAL_PLANETS",
    "OUTER_PLANETS",
    "MAJOR_PLANETS",
    "LUNAR_NODES",
    "LUNAR_APOGEES",
    "ASTEROIDS",
]


class Planet(StrEnum):
    """Bodies the engine can request from an ephemeris provider."""

    SUN = "Sun"
    MOON = "Moon"
    MERCURY = "Mercury"
    VENUS = "Venus"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"
    PLUTO = "Pluto"
    MEAN_NODE = "Mean Node"
    TRUE_NODE = "True Node"
    MEAN_APOGEE = "Mean Apogee"
    OSCULATING_APOGEE = "Osculating Apogee"
    EARTH = "Earth"
    CHIRON = "Chiron"
    PHOLUS = "Pholus"
    CERES = "Ceres"
    PALLAS = "Pallas"
    JUNO = "Juno"
    VESTA = "Vesta"

    @property
    def swe_id(self) -> int:
        """Swiss Ephemeris body index for this planet."""

        return SWE_BODY_IDS[self]

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def is_node(self) -> bool:
        return self in LUNAR_NODES

    @classmethod
    def from_swe_id(cls, body_id: int) -> Planet | None:
        """Return the planet registered under ``body_id`` or ``None``."""

        for planet, code in SWE_BODY_IDS.items():
            if code == body_id:
                return planet
        return None

    @classmethod
    def from_name(cls, name: str) -> Planet | None:
        """Case-insensitive lookup by display name or enum member name."""

        token = (name or "").strip().lower()
        if not token:
            return None
        for planet in cls:
            if planet.value.lower() == token or planet.name.lower() == token.replace(" ", "_"):
                return planet
        return None


# Swiss Ephemeris body indexes are part of its public C API and stable across releases.
SWE_BODY_IDS: Final[Mapping[Planet, int]] = MappingProxyType(
    {
        Planet.SUN: 0,
        Planet.MOON: 1,
        Planet.MERCURY: 2,
        Planet.VENUS: 3,
        Planet.MARS: 4,
        Planet.JUPITER: 5,
        Planet.SATURN: 6,
        Planet.URANUS: 7,
        Planet.NEPTUNE: 8,
        Planet.PLUTO: 9,
        Planet.MEAN_NODE: 10,
        Planet.TRUE_NODE: 11,
        Planet.MEAN_APOGEE: 12,
        Planet.OSCULATING_APOGEE: 13,
        Planet.EARTH: 14,
        Planet.CHIRON: 15,
        Planet.PHOLUS: 16,
        Planet.CERES: 17,
        Planet.PALLAS: 18,
        Planet.JUNO: 19,
        Planet.VESTA: 20,
    }
)

# The seven grahas used by classical Jyotish.
TRADITIONAL_PLANETS: Final[tuple[Planet, ...]] = (
    Planet.SUN,
    Planet.MOON,
    Planet.MERCURY,
    Planet.VENUS,
    Planet.MARS,
    Planet.JUPITER,
    Planet.SATURN,
)

OUTER_PLANETS: Final[tuple[Planet, ...]] = (
    Planet.URANUS,
    Planet.NEPTUNE,
    Planet.PLUTO,
)

MAJOR_PLANETS: Final[tuple[Planet, ...]] = TRADITIONAL_PLANETS + OUTER_PLANETS

LUNAR_NODES: Final[tuple[Planet, ...]] = (Planet.MEAN_NODE, Planet.TRUE_NODE)

LUNAR_APOGEES: Final[tuple[Planet, ...]] = (
    Planet.MEAN_APOGEE,
    Planet.OSCULATING_APOGEE,
)

ASTEROIDS: Final[tuple[Planet, ...]] = (
    Planet.CHIRON,
    Planet.PHOLUS,
    Planet.CERES,
    Planet.PALLAS,
    Planet.JUNO,
    Planet.VESTA,
)
