"""Calculation flag bundles translated into Swiss Ephemeris bit masks."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Final

from .sidereal import DEFAULT_SIDEREAL_MODE, SiderealMode

__all__ = [
    "FLG_SWIEPH",
    "FLG_MOSEPH",
    "FLG_SPEED",
    "FLG_EQUATORIAL",
    "FLG_TOPOCTR",
    "CalculationFlags",
]

# SEFLG_* bit values from swephexp.h; kept local so flags can be built without
# importing the extension module.
FLG_SWIEPH: Final[int] = 2
FLG_MOSEPH: Final[int] = 4
FLG_SPEED: Final[int] = 256
FLG_EQUATORIAL: Final[int] = 2 * 1024
FLG_TOPOCTR: Final[int] = 32 * 1024


@dataclass(frozen=True, slots=True)
class CalculationFlags:
    """Options controlling a single ephemeris request.

    ``sidereal_mode`` only selects which ayanamsa the chart layer fetches; the
    position request itself stays tropical so that the correction is applied
    exactly once.
    """

    use_swiss_ephemeris: bool = True
    calculate_speed: bool = True
    sidereal_mode: SiderealMode = DEFAULT_SIDEREAL_MODE
    use_topocentric: bool = False
    use_equatorial: bool = False

    @classmethod
    def default(cls) -> CalculationFlags:
        return cls()

    @classmethod
    def topocentric(cls, **overrides: Any) -> CalculationFlags:
        return cls(use_topocentric=True, **overrides)

    def replace(self, **changes: Any) -> CalculationFlags:
        return dataclasses.replace(self, **changes)

    def to_swe_flags(self) -> int:
        """Return the integer bit mask passed to ``swe_calc_ut``."""

        flags = FLG_SWIEPH if self.use_swiss_ephemeris else FLG_MOSEPH
        if self.calculate_speed:
            flags |= FLG_SPEED
        if self.use_topocentric:
            flags |= FLG_TOPOCTR
        if self.use_equatorial:
            flags |= FLG_EQUATORIAL
        return flags

    def to_dict(self) -> dict[str, object]:
        return {
            "use_swiss_ephemeris": self.use_swiss_ephemeris,
            "calculate_speed": self.calculate_speed,
            "sidereal_mode": self.sidereal_mode.value,
            "use_topocentric": self.use_topocentric,
            "use_equatorial": self.use_equatorial,
        }
