"""Ketu, the descending lunar node, derived from Rahu."""

from __future__ import annotations

from dataclasses import dataclass

from ..zodiac import normalize_degrees
from .positions import PlanetPosition, ZodiacPlacement

__all__ = ["KETU_NAME", "KetuPosition"]

KETU_NAME = "Ketu"


@dataclass(frozen=True, slots=True)
class KetuPosition(ZodiacPlacement):
    """Computed view of the point opposite ``rahu``.

    Nothing is stored beyond Rahu itself; every field is derived on access.
    """

    rahu: PlanetPosition

    @property
    def longitude(self) -> float:  # type: ignore[override]
        return normalize_degrees(self.rahu.longitude + 180.0)

    @property
    def latitude(self) -> float:
        return -self.rahu.latitude

    @property
    def distance(self) -> float:
        return self.rahu.distance

    @property
    def speed_longitude(self) -> float:
        return -self.rahu.speed_longitude

    @property
    def speed_latitude(self) -> float:
        return -self.rahu.speed_latitude

    @property
    def julian_day(self) -> float:
        return self.rahu.julian_day

    @property
    def is_retrograde(self) -> bool:
        # The nodes are treated as permanently retrograde.
        return True

    @property
    def is_combust(self) -> bool:
        return False

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "planet": KETU_NAME,
            "julian_day": self.julian_day,
            "longitude": self.longitude,
            "latitude": self.latitude,
            "distance": self.distance,
            "speed_longitude": self.speed_longitude,
            "speed_latitude": self.speed_latitude,
            "is_retrograde": self.is_retrograde,
            "is_combust": self.is_combust,
        }
        payload.update(self._zodiac_dict())
        return payload
