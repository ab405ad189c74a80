"""Sidereal planet positions derived from raw tropical samples."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from ..bodies import Planet
from ..errors import CalculationError, JyotishError
from ..ephemeris.flags import CalculationFlags
from ..ephemeris.provider import EphemerisProvider, RawSample
from ..location import GeoLocation
from ..zodiac import (
    DMS,
    dms,
    format_position,
    format_position_dms,
    nakshatra_index,
    nakshatra_name,
    pada,
    position_in_sign,
    sign_index,
    sign_name,
    to_sidereal,
)
from .combustion import is_combust

__all__ = ["ZodiacPlacement", "PlanetPosition", "compute_planet_position"]


class ZodiacPlacement:
    """Sign and nakshatra views shared by anything exposing ``longitude``."""

    __slots__ = ()

    longitude: float

    @property
    def sign_index(self) -> int:
        return sign_index(self.longitude)

    @property
    def sign(self) -> str:
        return sign_name(self.longitude)

    @property
    def position_in_sign(self) -> float:
        return position_in_sign(self.longitude)

    @property
    def dms(self) -> DMS:
        return dms(self.position_in_sign)

    @property
    def nakshatra_index(self) -> int:
        return nakshatra_index(self.longitude)

    @property
    def nakshatra(self) -> str:
        return nakshatra_name(self.longitude)

    @property
    def pada(self) -> int:
        return pada(self.longitude)

    @property
    def formatted(self) -> str:
        return format_position(self.longitude)

    @property
    def formatted_dms(self) -> str:
        return format_position_dms(self.longitude)

    def _zodiac_dict(self) -> dict[str, object]:
        return {
            "sign": self.sign,
            "sign_index": self.sign_index,
            "position_in_sign": self.position_in_sign,
            "nakshatra": self.nakshatra,
            "nakshatra_index": self.nakshatra_index,
            "pada": self.pada,
            "formatted": self.formatted,
        }


@dataclass(frozen=True, slots=True)
class PlanetPosition(ZodiacPlacement):
    """Sidereal position of one planet at one instant.

    ``longitude`` is sidereal and normalised into ``[0, 360)``; latitude,
    distance and speeds are copied unchanged from the provider sample.
    """

    planet: Planet
    julian_day: float
    longitude: float
    latitude: float
    distance: float
    speed_longitude: float
    speed_latitude: float
    speed_distance: float
    is_combust: bool = False

    @property
    def is_retrograde(self) -> bool:
        return self.speed_longitude < 0.0

    @classmethod
    def from_sample(
        cls,
        planet: Planet,
        sample: RawSample,
        julian_day: float,
        ayanamsa: float,
    ) -> PlanetPosition:
        return cls(
            planet=planet,
            julian_day=julian_day,
            longitude=to_sidereal(sample.longitude, ayanamsa),
            latitude=sample.latitude,
            distance=sample.distance,
            speed_longitude=sample.speed_longitude,
            speed_latitude=sample.speed_latitude,
            speed_distance=sample.speed_distance,
        )

    def with_combustion_check(self, sun: PlanetPosition) -> PlanetPosition:
        """Return a copy whose ``is_combust`` reflects the distance to ``sun``."""

        if self.planet.is_node:
            combust = False
        else:
            combust = is_combust(self.planet, self.longitude, sun.longitude)
        return dataclasses.replace(self, is_combust=combust)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "planet": self.planet.value,
            "julian_day": self.julian_day,
            "longitude": self.longitude,
            "latitude": self.latitude,
            "distance": self.distance,
            "speed_longitude": self.speed_longitude,
            "speed_latitude": self.speed_latitude,
            "speed_distance": self.speed_distance,
            "is_retrograde": self.is_retrograde,
            "is_combust": self.is_combust,
        }
        payload.update(self._zodiac_dict())
        return payload


def compute_planet_position(
    provider: EphemerisProvider,
    planet: Planet,
    julian_day: float,
    ayanamsa: float,
    *,
    flags: CalculationFlags | None = None,
    observer: GeoLocation | None = None,
) -> PlanetPosition:
    """Sample ``planet`` and convert it to sidereal using ``ayanamsa``.

    Any provider failure is re-raised as :class:`CalculationError`.
    """

    try:
        sample = provider.sample_planet(
            planet, julian_day, flags or CalculationFlags.default(), observer=observer
        )
    except JyotishError:
        raise
    except Exception as exc:
        raise CalculationError(
            f"Failed to calculate {planet.display_name} position",
            cause=exc,
            context={"planet": planet.value, "julian_day": julian_day},
        ) from exc
    return PlanetPosition.from_sample(planet, sample, julian_day, ayanamsa)
