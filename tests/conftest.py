"""Shared fixtures for the chart engine test-suite."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime

import pytest

from jyotish.bodies import Planet
from jyotish.ephemeris.flags import CalculationFlags
from jyotish.ephemeris.provider import RawHouses, RawSample
from jyotish.ephemeris.sidereal import SiderealMode
from jyotish.location import GeoLocation


def make_sample(longitude: float, speed: float = 1.0, latitude: float = 0.0) -> RawSample:
    return RawSample(
        longitude=longitude,
        latitude=latitude,
        distance=1.0,
        speed_longitude=speed,
        speed_latitude=0.01,
        speed_distance=0.0,
    )


# Tropical longitudes; with a 24 degree ayanamsa the sidereal values are 24 lower.
DEFAULT_SAMPLES: Mapping[Planet, RawSample] = {
    Planet.SUN: make_sample(34.0),  # sidereal 10 -> Aries, exalted
    Planet.MOON: make_sample(60.0, speed=13.0),  # sidereal 36 -> Taurus, exalted
    Planet.MERCURY: make_sample(40.0, speed=-0.5),  # sidereal 16, combust & retrograde
    Planet.VENUS: make_sample(200.0),  # sidereal 176 -> Virgo, debilitated
    Planet.MARS: make_sample(24.0),  # sidereal 0 -> Aries, own sign
    Planet.JUPITER: make_sample(274.0),  # sidereal 250 -> Sagittarius, own sign
    Planet.SATURN: make_sample(334.0),  # sidereal 310 -> Aquarius, own sign
    Planet.URANUS: make_sample(100.0),
    Planet.NEPTUNE: make_sample(130.0),
    Planet.PLUTO: make_sample(160.0),
    Planet.MEAN_NODE: make_sample(224.0, speed=-0.05),  # sidereal 200
}

# Equal 30 degree houses starting at tropical 24, i.e. sidereal 0.
DEFAULT_HOUSES = RawHouses(
    cusps=tuple(24.0 + 30.0 * i for i in range(12)),
    ascendant=24.0,
    midheaven=294.0,
    system_code="P",
)


class FakeProvider:
    """Deterministic in-memory :class:`EphemerisProvider`."""

    def __init__(
        self,
        samples: Mapping[Planet, RawSample] | None = None,
        *,
        ayanamsa: float = 24.0,
        houses: RawHouses = DEFAULT_HOUSES,
        fail_on: Planet | None = None,
    ) -> None:
        self.samples = dict(DEFAULT_SAMPLES if samples is None else samples)
        self.ayanamsa_value = ayanamsa
        self.raw_houses = houses
        self.fail_on = fail_on
        self.calls: list[tuple[str, object]] = []
        self.initialized = False
        self.closed = False

    def initialize(self) -> None:
        self.initialized = True

    def close(self) -> None:
        self.closed = True

    def julian_day(self, moment: datetime) -> float:
        if moment.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        delta = moment.astimezone(UTC) - datetime(2000, 1, 1, 12, tzinfo=UTC)
        return 2451545.0 + delta.total_seconds() / 86400.0

    def sample_planet(
        self,
        planet: Planet,
        julian_day: float,
        flags: CalculationFlags,
        *,
        observer: GeoLocation | None = None,
    ) -> RawSample:
        self.calls.append(("sample_planet", planet))
        if planet is self.fail_on:
            raise RuntimeError(f"no data for {planet.value}")
        return self.samples[planet]

    def ayanamsa(self, julian_day: float, mode: SiderealMode) -> float:
        self.calls.append(("ayanamsa", mode))
        return self.ayanamsa_value

    def houses(
        self,
        julian_day: float,
        latitude: float,
        longitude: float,
        system_code: str,
    ) -> RawHouses:
        self.calls.append(("houses", system_code))
        return self.raw_houses


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def kathmandu() -> GeoLocation:
    return GeoLocation(latitude=27.7172, longitude=85.3240, altitude=1400.0)
