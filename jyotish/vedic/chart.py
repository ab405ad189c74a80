"""Assembly of complete sidereal (Vedic) charts."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from time import perf_counter
from types import MappingProxyType
from typing import TypeVar

from ..bodies import MAJOR_PLANETS, TRADITIONAL_PLANETS, Planet
from ..errors import CalculationError, JyotishError, ValidationError
from ..ephemeris.flags import CalculationFlags
from ..ephemeris.provider import EphemerisProvider
from ..ephemeris.sidereal import DEFAULT_SIDEREAL_MODE, SiderealMode, resolve_sidereal_mode
from ..location import GeoLocation
from ..observability import CHART_COMPUTE_DURATION, COMPUTE_ERRORS
from .dignity import Dignity, classify_dignity, debilitation_degree, exaltation_degree
from .houses import (
    REFERENCE_HOUSE_SYSTEM,
    REFERENCE_HOUSE_SYSTEM_NAME,
    HouseSystem,
    build_house_system,
)
from .nodes import KetuPosition
from .positions import PlanetPosition, compute_planet_position

__all__ = [
    "DEFAULT_HOUSE_SYSTEM",
    "RAHU",
    "VedicPlanetInfo",
    "VedicChart",
    "compute_vedic_chart",
]

LOG = logging.getLogger(__name__)

DEFAULT_HOUSE_SYSTEM = "whole_sign"
RAHU = Planet.MEAN_NODE

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class VedicPlanetInfo:
    """A planet's position together with its house, dignity and combustion."""

    position: PlanetPosition
    house: int
    dignity: Dignity
    is_combust: bool
    exaltation_degree: float | None = None
    debilitation_degree: float | None = None

    @property
    def planet(self) -> Planet:
        return self.position.planet

    @property
    def longitude(self) -> float:
        return self.position.longitude

    @property
    def sign(self) -> str:
        return self.position.sign

    @property
    def nakshatra(self) -> str:
        return self.position.nakshatra

    @property
    def pada(self) -> int:
        return self.position.pada

    @property
    def is_retrograde(self) -> bool:
        return self.position.is_retrograde

    def to_dict(self) -> dict[str, object]:
        return {
            "position": self.position.to_dict(),
            "house": self.house,
            "dignity": self.dignity.value,
            "is_combust": self.is_combust,
            "exaltation_degree": self.exaltation_degree,
            "debilitation_degree": self.debilitation_degree,
        }


@dataclass(frozen=True)
class VedicChart:
    """Immutable sidereal chart for one instant and location.

    ``planets`` holds the requested bodies only; Rahu and Ketu are exposed
    separately and are not included in the collection queries.
    """

    julian_day: float
    location: GeoLocation
    houses: HouseSystem
    planets: Mapping[Planet, VedicPlanetInfo]
    rahu: VedicPlanetInfo
    ketu: KetuPosition
    ayanamsa: float
    ayanamsa_mode: SiderealMode = DEFAULT_SIDEREAL_MODE
    moment: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "planets", MappingProxyType(dict(self.planets)))

    @property
    def ascendant(self) -> float:
        return self.houses.ascendant

    @property
    def ascendant_sign(self) -> str:
        return self.houses.ascendant_sign

    def planet(self, planet: Planet) -> VedicPlanetInfo | None:
        return self.planets.get(planet)

    def planets_in_house(self, house: int) -> list[VedicPlanetInfo]:
        return [info for info in self.planets.values() if info.house == house]

    def planets_with_dignity(self, dignity: Dignity) -> list[VedicPlanetInfo]:
        return [info for info in self.planets.values() if info.dignity is dignity]

    @property
    def retrograde_planets(self) -> list[VedicPlanetInfo]:
        return [info for info in self.planets.values() if info.is_retrograde]

    @property
    def exalted_planets(self) -> list[VedicPlanetInfo]:
        return self.planets_with_dignity(Dignity.EXALTED)

    @property
    def debilitated_planets(self) -> list[VedicPlanetInfo]:
        return self.planets_with_dignity(Dignity.DEBILITATED)

    @property
    def combust_planets(self) -> list[VedicPlanetInfo]:
        return [info for info in self.planets.values() if info.is_combust]

    def to_dict(self) -> dict[str, object]:
        return {
            "julian_day": self.julian_day,
            "moment": self.moment.isoformat() if self.moment else None,
            "location": self.location.to_dict(),
            "ayanamsa": self.ayanamsa,
            "ayanamsa_mode": self.ayanamsa_mode.value,
            "houses": self.houses.to_dict(),
            "planets": {planet.value: info.to_dict() for planet, info in self.planets.items()},
            "rahu": self.rahu.to_dict(),
            "ketu": self.ketu.to_dict(),
        }


def _provider_call(description: str, func: Callable[[], _T], **context: object) -> _T:
    try:
        return func()
    except JyotishError:
        raise
    except Exception as exc:
        raise CalculationError(
            f"Failed to calculate {description}", cause=exc, context=context
        ) from exc


def _resolve_planets(
    planets: Iterable[Planet] | None, include_outer_planets: bool
) -> tuple[Planet, ...]:
    if planets is None:
        return MAJOR_PLANETS if include_outer_planets else TRADITIONAL_PLANETS
    resolved = tuple(dict.fromkeys(planets))
    nodes = [planet for planet in resolved if planet.is_node]
    if nodes:
        raise ValidationError(
            "lunar nodes are added to every chart and cannot be requested explicitly",
            context={"planets": [planet.value for planet in nodes]},
        )
    return resolved


def _planet_info(position: PlanetPosition, houses: HouseSystem) -> VedicPlanetInfo:
    planet = position.planet
    return VedicPlanetInfo(
        position=position,
        house=houses.house_for_longitude(position.longitude),
        dignity=classify_dignity(planet, position.sign_index),
        is_combust=position.is_combust,
        exaltation_degree=exaltation_degree(planet),
        debilitation_degree=debilitation_degree(planet),
    )


def compute_vedic_chart(
    provider: EphemerisProvider,
    julian_day: float,
    location: GeoLocation,
    *,
    planets: Iterable[Planet] | None = None,
    house_system: str = DEFAULT_HOUSE_SYSTEM,
    ayanamsa_mode: SiderealMode | str = DEFAULT_SIDEREAL_MODE,
    include_outer_planets: bool = False,
    flags: CalculationFlags | None = None,
    moment: datetime | None = None,
) -> VedicChart:
    """Compute a sidereal chart for ``julian_day`` at ``location``.

    The ayanamsa is fetched once and applied to every planet, the ascendant,
    the midheaven and each cusp. House cusps are always requested from the
    provider as Placidus; ``house_system`` is recorded as
    ``HouseSystem.requested_system`` only.

    Any provider failure aborts the whole computation with
    :class:`CalculationError`; no partial chart is returned.
    """

    mode = resolve_sidereal_mode(ayanamsa_mode)
    requested = _resolve_planets(planets, include_outer_planets)
    request_flags = (flags or CalculationFlags.default()).replace(sidereal_mode=mode)
    observer = location if request_flags.use_topocentric else None

    start = perf_counter()
    try:
        raw_houses = _provider_call(
            "house cusps",
            lambda: provider.houses(
                julian_day, location.latitude, location.longitude, REFERENCE_HOUSE_SYSTEM
            ),
            julian_day=julian_day,
        )
        ayanamsa = _provider_call(
            "ayanamsa",
            lambda: provider.ayanamsa(julian_day, mode),
            julian_day=julian_day,
            mode=mode.value,
        )
        houses = build_house_system(raw_houses, ayanamsa, requested_system=house_system)

        def position_of(planet: Planet) -> PlanetPosition:
            return compute_planet_position(
                provider, planet, julian_day, ayanamsa, flags=request_flags, observer=observer
            )

        # The Sun is always sampled first; it is the combustion reference.
        sun = position_of(Planet.SUN)
        positions = {Planet.SUN: sun} if Planet.SUN in requested else {}
        for planet in requested:
            if planet is not Planet.SUN:
                positions[planet] = position_of(planet).with_combustion_check(sun)
        rahu = position_of(RAHU)

        ordered = {planet: positions[planet] for planet in requested}
        chart = VedicChart(
            julian_day=julian_day,
            location=location,
            houses=houses,
            planets={planet: _planet_info(pos, houses) for planet, pos in ordered.items()},
            rahu=_planet_info(rahu, houses),
            ketu=KetuPosition(rahu=rahu),
            ayanamsa=ayanamsa,
            ayanamsa_mode=mode,
            moment=moment,
        )
    except JyotishError as exc:
        COMPUTE_ERRORS.labels(component="vedic_chart", error=exc.__class__.__name__).inc()
        raise
    finally:
        CHART_COMPUTE_DURATION.labels(house_system=REFERENCE_HOUSE_SYSTEM_NAME).observe(
            perf_counter() - start
        )

    LOG.debug(
        {
            "event": "vedic_chart_computed",
            "julian_day": julian_day,
            "ayanamsa_mode": mode.value,
            "ayanamsa": ayanamsa,
            "planets": [planet.value for planet in requested],
            "ascendant_sign": chart.ascendant_sign,
        }
    )
    return chart
