"""Provider protocol consumed by the chart layer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable

from ..bodies import Planet
from ..location import GeoLocation
from .flags import CalculationFlags
from .sidereal import SiderealMode

__all__ = ["RawSample", "RawHouses", "EphemerisProvider"]


@dataclass(frozen=True, slots=True)
class RawSample:
    """Tropical ecliptic output of one ephemeris request.

    Angles are degrees, distances astronomical units and speeds per day.
    """

    longitude: float
    latitude: float
    distance: float
    speed_longitude: float
    speed_latitude: float
    speed_distance: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> RawSample:
        if len(values) < 6:
            raise ValueError(f"expected six ephemeris values, got {len(values)}")
        return cls(*(float(v) for v in values[:6]))


@dataclass(frozen=True, slots=True)
class RawHouses:
    """Tropical house cusps and angles for a location and instant."""

    cusps: tuple[float, ...]
    ascendant: float
    midheaven: float
    system_code: str

    def __post_init__(self) -> None:
        cusps = tuple(float(c) for c in self.cusps)
        if len(cusps) != 12:
            raise ValueError(f"expected 12 house cusps, got {len(cusps)}")
        object.__setattr__(self, "cusps", cusps)


@runtime_checkable
class EphemerisProvider(Protocol):
    """Minimal surface the chart assembler needs from an ephemeris backend.

    Implementations raise on failure; the chart layer wraps any exception into
    :class:`~jyotish.errors.CalculationError`.
    """

    def julian_day(self, moment: datetime) -> float: ...

    def sample_planet(
        self,
        planet: Planet,
        julian_day: float,
        flags: CalculationFlags,
        *,
        observer: GeoLocation | None = None,
    ) -> RawSample: ...

    def ayanamsa(self, julian_day: float, mode: SiderealMode) -> float: ...

    def houses(
        self,
        julian_day: float,
        latitude: float,
        longitude: float,
        system_code: str,
    ) -> RawHouses: ...
