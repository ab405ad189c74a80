"""Sign-based dignity of the classical planets.

Sign tables follow the Parasara scheme (zero-based, ``0`` = Aries).  Rahu's
exaltation in Gemini and debilitation in Sagittarius follow the common
Parasara variant; Ketu and the outer planets carry no dignity and are always
classified as :attr:`Dignity.NEUTRAL`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from ..bodies import Planet

__all__ = [
    "Dignity",
    "DignityTables",
    "CLASSICAL_DIGNITIES",
    "EXALTATION_DEGREES",
    "DEBILITATION_DEGREES",
    "classify_dignity",
    "exaltation_degree",
    "debilitation_degree",
]


class Dignity(StrEnum):
    """Dignity categories in precedence order."""

    EXALTED = "exalted"
    DEBILITATED = "debilitated"
    OWN_SIGN = "own_sign"
    MOOLA_TRIKONA = "moola_trikona"
    NEUTRAL = "neutral"

    @property
    def english(self) -> str:
        return _LABELS[self][0]

    @property
    def sanskrit(self) -> str:
        return _LABELS[self][1]


_LABELS: Final[Mapping[Dignity, tuple[str, str]]] = MappingProxyType(
    {
        Dignity.EXALTED: ("Exalted", "Uchcha"),
        Dignity.DEBILITATED: ("Debilitated", "Neecha"),
        Dignity.OWN_SIGN: ("Own Sign", "Swakshetra"),
        Dignity.MOOLA_TRIKONA: ("Moola Trikona", "Moolatrikona"),
        Dignity.NEUTRAL: ("Neutral", "Sama"),
    }
)


def _freeze(mapping: Mapping[Planet, object]) -> Mapping[Planet, object]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class DignityTables:
    """Sign lookup tables consulted by :func:`classify_dignity`.

    Planets absent from a table never match that category.
    """

    exaltation: Mapping[Planet, int] = field(default_factory=dict)
    debilitation: Mapping[Planet, int] = field(default_factory=dict)
    own_signs: Mapping[Planet, tuple[int, ...]] = field(default_factory=dict)
    moola_trikona: Mapping[Planet, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exaltation", _freeze(self.exaltation))
        object.__setattr__(self, "debilitation", _freeze(self.debilitation))
        object.__setattr__(
            self,
            "own_signs",
            _freeze({planet: tuple(signs) for planet, signs in self.own_signs.items()}),
        )
        object.__setattr__(self, "moola_trikona", _freeze(self.moola_trikona))


CLASSICAL_DIGNITIES: Final[DignityTables] = DignityTables(
    exaltation={
        Planet.SUN: 0,
        Planet.MOON: 1,
        Planet.MERCURY: 5,
        Planet.VENUS: 11,
        Planet.MARS: 9,
        Planet.JUPITER: 3,
        Planet.SATURN: 6,
        Planet.MEAN_NODE: 2,
        Planet.TRUE_NODE: 2,
    },
    debilitation={
        Planet.SUN: 6,
        Planet.MOON: 7,
        Planet.MERCURY: 11,
        Planet.VENUS: 5,
        Planet.MARS: 3,
        Planet.JUPITER: 9,
        Planet.SATURN: 0,
        Planet.MEAN_NODE: 8,
        Planet.TRUE_NODE: 8,
    },
    own_signs={
        Planet.SUN: (4,),
        Planet.MOON: (3,),
        Planet.MERCURY: (2, 5),
        Planet.VENUS: (1, 6),
        Planet.MARS: (0, 7),
        Planet.JUPITER: (8, 11),
        Planet.SATURN: (9, 10),
    },
    moola_trikona={
        Planet.SUN: 4,
        Planet.MOON: 1,
        Planet.MERCURY: 5,
        Planet.VENUS: 6,
        Planet.MARS: 0,
        Planet.JUPITER: 8,
        Planet.SATURN: 10,
    },
)

# Deepest exaltation and debilitation points as absolute sidereal longitudes.
EXALTATION_DEGREES: Final[Mapping[Planet, float]] = MappingProxyType(
    {
        Planet.SUN: 10.0,
        Planet.MOON: 33.0,
        Planet.MERCURY: 165.0,
        Planet.VENUS: 357.0,
        Planet.MARS: 298.0,
        Planet.JUPITER: 95.0,
        Planet.SATURN: 200.0,
    }
)

DEBILITATION_DEGREES: Final[Mapping[Planet, float]] = MappingProxyType(
    {
        Planet.SUN: 190.0,
        Planet.MOON: 213.0,
        Planet.MERCURY: 345.0,
        Planet.VENUS: 165.0,
        Planet.MARS: 118.0,
        Planet.JUPITER: 278.0,
        Planet.SATURN: 20.0,
    }
)


def classify_dignity(
    planet: Planet,
    sign_index: int,
    *,
    tables: DignityTables = CLASSICAL_DIGNITIES,
) -> Dignity:
    """Return the dignity of ``planet`` occupying ``sign_index``.

    Categories are tested in order (exalted, debilitated, own sign, moola
    trikona) and the first match wins; otherwise the planet is neutral.
    """

    sign = sign_index % 12
    if tables.exaltation.get(planet) == sign:
        return Dignity.EXALTED
    if tables.debilitation.get(planet) == sign:
        return Dignity.DEBILITATED
    if sign in tables.own_signs.get(planet, ()):
        return Dignity.OWN_SIGN
    if tables.moola_trikona.get(planet) == sign:
        return Dignity.MOOLA_TRIKONA
    return Dignity.NEUTRAL


def exaltation_degree(planet: Planet) -> float | None:
    """Absolute longitude of deepest exaltation, or ``None`` when undefined."""

    return EXALTATION_DEGREES.get(planet)


def debilitation_degree(planet: Planet) -> float | None:
    """Absolute longitude of deepest debilitation, or ``None`` when undefined."""

    return DEBILITATION_DEGREES.get(planet)
