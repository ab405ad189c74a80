"""Degree normalisation, sidereal correction and zodiac lookups.

All longitudes are expressed in **degrees**.  Zodiac lookups assume a
sidereal longitude but are total over the reals: any input is wrapped before
it is mapped onto the twelve signs or the twenty-seven nakshatras, so none of
the helpers in this module raise.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Final, NamedTuple

__all__ = [
    "SIGN_ARC_DEGREES",
    "NAKSHATRA_ARC_DEGREES",
    "PADA_ARC_DEGREES",
    "ZODIAC_SIGNS",
    "NAKSHATRAS",
    "DMS",
    "normalize_degrees",
    "to_sidereal",
    "signed_separation",
    "sign_index",
    "sign_name",
    "position_in_sign",
    "nakshatra_index",
    "nakshatra_name",
    "pada",
    "dms",
    "format_position",
    "format_position_dms",
]

SIGN_ARC_DEGREES: Final[float] = 30.0
NAKSHATRA_ARC_DEGREES: Final[float] = 360.0 / 27.0
PADA_ARC_DEGREES: Final[float] = NAKSHATRA_ARC_DEGREES / 4.0

ZODIAC_SIGNS: Final[Sequence[str]] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)

NAKSHATRAS: Final[Sequence[str]] = (
    "Ashwini",
    "Bharani",
    "Krittika",
    "Rohini",
    "Mrigashira",
    "Ardra",
    "Punarvasu",
    "Pushya",
    "Ashlesha",
    "Magha",
    "Purva Phalguni",
    "Uttara Phalguni",
    "Hasta",
    "Chitra",
    "Swati",
    "Vishakha",
    "Anuradha",
    "Jyeshtha",
    "Mula",
    "Purva Ashadha",
    "Uttara Ashadha",
    "Shravana",
    "Dhanishta",
    "Shatabhisha",
    "Purva Bhadrapada",
    "Uttara Bhadrapada",
    "Revati",
)


class DMS(NamedTuple):
    """Degrees, minutes and seconds of an angle within its sign."""

    degrees: int
    minutes: int
    seconds: float


def normalize_degrees(angle: float) -> float:
    """Return ``angle`` wrapped into ``[0, 360)``.

    Negative inputs and inputs spanning several revolutions are handled; the
    result is congruent to ``angle`` modulo 360.
    """

    return (math.fmod(float(angle), 360.0) + 360.0) % 360.0


def to_sidereal(tropical_longitude: float, ayanamsa: float) -> float:
    """Convert a tropical longitude to sidereal by subtracting ``ayanamsa``."""

    return normalize_degrees(tropical_longitude - ayanamsa)


def signed_separation(longitude: float, reference: float) -> float:
    """Signed separation of ``longitude`` from ``reference`` in ``[-180, 180)``."""

    return ((longitude - reference + 540.0) % 360.0) - 180.0


def sign_index(longitude: float) -> int:
    """Zero-based zodiac sign index (0 = Aries, 11 = Pisces)."""

    return int(math.floor(longitude / SIGN_ARC_DEGREES)) % 12


def sign_name(longitude: float) -> str:
    return ZODIAC_SIGNS[sign_index(longitude)]


def position_in_sign(longitude: float) -> float:
    """Degrees elapsed within the occupied sign, in ``[0, 30)``."""

    return longitude % SIGN_ARC_DEGREES


def nakshatra_index(longitude: float) -> int:
    """Zero-based nakshatra index (0 = Ashwini, 26 = Revati)."""

    return int(math.floor(longitude / NAKSHATRA_ARC_DEGREES)) % 27


def nakshatra_name(longitude: float) -> str:
    return NAKSHATRAS[nakshatra_index(longitude)]


def pada(longitude: float) -> int:
    """Nakshatra quarter (1-4) occupied by ``longitude``."""

    offset = longitude % NAKSHATRA_ARC_DEGREES
    quarter = int(math.floor(offset / PADA_ARC_DEGREES))
    # Offsets one ulp below the arc can round up to a fifth quarter.
    return min(quarter, 3) + 1


def dms(value: float) -> DMS:
    """Split a non-negative degree value into degrees, minutes and seconds."""

    degrees = int(math.floor(value))
    minutes_decimal = (value - degrees) * 60.0
    minutes = int(math.floor(minutes_decimal))
    seconds = (minutes_decimal - minutes) * 60.0
    return DMS(degrees=degrees, minutes=minutes, seconds=seconds)


def format_position(longitude: float) -> str:
    """Traditional short notation, e.g. ``"15° Aries 30'"``."""

    parts = dms(position_in_sign(longitude))
    return f"{parts.degrees}° {sign_name(longitude)} {parts.minutes}'"


def format_position_dms(longitude: float) -> str:
    """Full notation, e.g. ``"15° 30' 12.50\" Aries"``."""

    parts = dms(position_in_sign(longitude))
    return f"{parts.degrees}° {parts.minutes}' {parts.seconds:.2f}\" {sign_name(longitude)}"
