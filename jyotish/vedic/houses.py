"""House cusps in the sidereal zodiac and longitude-to-house mapping."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from ..ephemeris.provider import RawHouses
from ..zodiac import sign_index, sign_name, to_sidereal

__all__ = [
    "REFERENCE_HOUSE_SYSTEM",
    "REFERENCE_HOUSE_SYSTEM_NAME",
    "HouseSystem",
    "house_of",
    "build_house_system",
]

LOG = logging.getLogger(__name__)

# Cusps are always requested as Placidus; the caller's preference is kept as
# metadata on the resulting HouseSystem only.
REFERENCE_HOUSE_SYSTEM: Final[str] = "P"
REFERENCE_HOUSE_SYSTEM_NAME: Final[str] = "Placidus"


def house_of(cusps: Sequence[float], longitude: float) -> int:
    """Return the 1-based house whose arc contains ``longitude``.

    Each arc runs from its cusp (inclusive) to the next (exclusive); the arc
    crossing 0 degrees is detected when the next cusp is not greater than the
    current one. Longitudes that fall in no arc, which only happens with
    degenerate cusps, resolve to house 1.
    """

    for index in range(12):
        current = cusps[index]
        following = cusps[(index + 1) % 12]
        if following > current:
            if current <= longitude < following:
                return index + 1
        elif longitude >= current or longitude < following:
            return index + 1
    LOG.debug({"event": "house_fallback", "longitude": longitude, "cusps": list(cusps)})
    return 1


@dataclass(frozen=True, slots=True)
class HouseSystem:
    """Sidereal cusps (house 1 first) plus ascendant and midheaven."""

    system: str
    cusps: tuple[float, ...]
    ascendant: float
    midheaven: float
    requested_system: str | None = None

    def __post_init__(self) -> None:
        cusps = tuple(float(c) for c in self.cusps)
        if len(cusps) != 12:
            raise ValueError(f"expected 12 house cusps, got {len(cusps)}")
        object.__setattr__(self, "cusps", cusps)

    def house_for_longitude(self, longitude: float) -> int:
        return house_of(self.cusps, longitude)

    def cusp(self, house: int) -> float:
        if not 1 <= house <= 12:
            raise ValueError(f"house must be between 1 and 12, got {house}")
        return self.cusps[house - 1]

    @property
    def ascendant_sign_index(self) -> int:
        return sign_index(self.ascendant)

    @property
    def ascendant_sign(self) -> str:
        return sign_name(self.ascendant)

    def to_dict(self) -> dict[str, object]:
        return {
            "system": self.system,
            "requested_system": self.requested_system,
            "cusps": list(self.cusps),
            "ascendant": self.ascendant,
            "ascendant_sign": self.ascendant_sign,
            "midheaven": self.midheaven,
        }


def build_house_system(
    raw: RawHouses,
    ayanamsa: float,
    *,
    requested_system: str | None = None,
) -> HouseSystem:
    """Convert tropical ``raw`` houses to sidereal using ``ayanamsa``."""

    return HouseSystem(
        system=REFERENCE_HOUSE_SYSTEM_NAME,
        cusps=tuple(to_sidereal(cusp, ayanamsa) for cusp in raw.cusps),
        ascendant=to_sidereal(raw.ascendant, ayanamsa),
        midheaven=to_sidereal(raw.midheaven, ayanamsa),
        requested_system=requested_system,
    )
