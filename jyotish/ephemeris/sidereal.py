"""Named ayanamsa systems and their Swiss Ephemeris ``SIDM_*`` constants."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final

from ..errors import ValidationError

__all__ = [
    "SiderealMode",
    "SiderealModeInfo",
    "SIDEREAL_MODES",
    "DEFAULT_SIDEREAL_MODE",
    "normalize_ayanamsa_name",
    "resolve_sidereal_mode",
]


class SiderealMode(StrEnum):
    """Reference systems accepted by ``swe_set_sid_mode``."""

    FAGAN_BRADLEY = "fagan_bradley"
    LAHIRI = "lahiri"
    DELUCE = "deluce"
    RAMAN = "raman"
    USHASHASHI = "ushashashi"
    KRISHNAMURTI = "krishnamurti"
    DJWHAL_KHUL = "djwhal_khul"
    YUKTESHWAR = "yukteshwar"
    JN_BHASIN = "jn_bhasin"
    BABYLONIAN_KUGLER1 = "babylonian_kugler1"
    BABYLONIAN_KUGLER2 = "babylonian_kugler2"
    BABYLONIAN_KUGLER3 = "babylonian_kugler3"
    BABYLONIAN_HUBER = "babylonian_huber"
    BABYLONIAN_ETPSC = "babylonian_etpsc"
    ALDEBARAN_15TAU = "aldebaran_15tau"
    HIPPARCHOS = "hipparchos"
    SASSANIAN = "sassanian"
    GALCENT_MULA_WILHELM = "galcent_mula_wilhelm"
    J2000_AYANAMSA = "ayanamsa"
    GALCENT_COCHRANE = "galcent_cochrane"
    GALEQU_IAU1958 = "galequ_iau1958"
    GALEQU_TRUE = "galequ_true"
    GALEQU_MULA = "galequ_mula"
    GALALIGN_MARDYKS = "galalign_mardyks"
    TRUE_CITRA = "true_citra"
    TRUE_REVATI = "true_revati"
    TRUE_PUSHYA = "true_pushya"
    GALCENT_RGILBRAND = "galcent_rgilbrand"
    GALCENT_0SAG = "galcent_0sag"
    J2000 = "j2000"
    J1900 = "j1900"
    B1950 = "b1950"
    SURYASIDDHANTA = "suryasiddhanta"
    SURYASIDDHANTA_MSUN = "suryasiddhanta_msun"
    ARYABHATA = "aryabhata"
    ARYABHATA_MSUN = "aryabhata_msun"
    SS_REVATI = "ss_revati"
    SS_CITRA = "ss_citra"
    TRUE_SHEORAN = "true_sheoran"
    TRUE_MULA = "true_mula"
    GALCENT_MULA0 = "galcent_mula0"
    GALCENT_MULA_VERNEAU = "galcent_mula_verneau"
    VALENS_MOON = "valens_moon"

    @property
    def swe_mode(self) -> int:
        return SIDEREAL_MODES[self].swe_mode

    @property
    def label(self) -> str:
        return SIDEREAL_MODES[self].label


@dataclass(frozen=True)
class SiderealModeInfo:
    """Swiss constant and display label for a :class:`SiderealMode`."""

    mode: SiderealMode
    swe_mode: int
    label: str


# SIDM_* values are part of the Swiss Ephemeris public API (swephexp.h).
_MODE_TABLE: tuple[tuple[SiderealMode, int, str], ...] = (
    (SiderealMode.FAGAN_BRADLEY, 0, "Fagan/Bradley"),
    (SiderealMode.LAHIRI, 1, "Lahiri"),
    (SiderealMode.DELUCE, 2, "De Luce"),
    (SiderealMode.RAMAN, 3, "Raman"),
    (SiderealMode.USHASHASHI, 4, "Ushashashi"),
    (SiderealMode.KRISHNAMURTI, 5, "Krishnamurti"),
    (SiderealMode.DJWHAL_KHUL, 6, "Djwhal Khul"),
    (SiderealMode.YUKTESHWAR, 7, "Yukteshwar"),
    (SiderealMode.JN_BHASIN, 8, "JN Bhasin"),
    (SiderealMode.BABYLONIAN_KUGLER1, 9, "Babylonian/Kugler 1"),
    (SiderealMode.BABYLONIAN_KUGLER2, 10, "Babylonian/Kugler 2"),
    (SiderealMode.BABYLONIAN_KUGLER3, 11, "Babylonian/Kugler 3"),
    (SiderealMode.BABYLONIAN_HUBER, 12, "Babylonian/Huber"),
    (SiderealMode.BABYLONIAN_ETPSC, 13, "Babylonian/ETPSC"),
    (SiderealMode.ALDEBARAN_15TAU, 14, "Aldebaran at 15 Tau"),
    (SiderealMode.HIPPARCHOS, 15, "Hipparchos"),
    (SiderealMode.SASSANIAN, 16, "Sassanian"),
    (SiderealMode.GALCENT_MULA_WILHELM, 17, "Galactic Center Mula Wilhelm"),
    (SiderealMode.J2000_AYANAMSA, 18, "Ayanamsa"),
    (SiderealMode.GALCENT_COCHRANE, 19, "Galactic Center Cochrane"),
    (SiderealMode.GALEQU_IAU1958, 20, "Gal Eq IAU 1958"),
    (SiderealMode.GALEQU_TRUE, 21, "Gal Eq True"),
    (SiderealMode.GALEQU_MULA, 22, "Gal Eq Mula"),
    (SiderealMode.GALALIGN_MARDYKS, 23, "Gal Align Mardyks"),
    (SiderealMode.TRUE_CITRA, 24, "True Citra"),
    (SiderealMode.TRUE_REVATI, 25, "True Revati"),
    (SiderealMode.TRUE_PUSHYA, 26, "True Pushya"),
    (SiderealMode.GALCENT_RGILBRAND, 27, "Galactic Center Gil Brand"),
    (SiderealMode.GALCENT_0SAG, 28, "Galactic Center 0 Sag"),
    (SiderealMode.J2000, 29, "J2000"),
    (SiderealMode.J1900, 30, "J1900"),
    (SiderealMode.B1950, 31, "B1950"),
    (SiderealMode.SURYASIDDHANTA, 32, "Surya Siddhanta"),
    (SiderealMode.SURYASIDDHANTA_MSUN, 33, "Surya Siddhanta MSun"),
    (SiderealMode.ARYABHATA, 34, "Aryabhata"),
    (SiderealMode.ARYABHATA_MSUN, 35, "Aryabhata MSun"),
    (SiderealMode.SS_REVATI, 36, "SS Revati"),
    (SiderealMode.SS_CITRA, 37, "SS Citra"),
    (SiderealMode.TRUE_SHEORAN, 38, "True Sheoran"),
    (SiderealMode.TRUE_MULA, 39, "True Mula"),
    (SiderealMode.GALCENT_MULA0, 40, "Galactic Center Mula 0"),
    (SiderealMode.GALCENT_MULA_VERNEAU, 41, "Galactic Center Mula Verneau"),
    (SiderealMode.VALENS_MOON, 42, "Valens Moon"),
)

SIDEREAL_MODES: Final[Mapping[SiderealMode, SiderealModeInfo]] = MappingProxyType(
    {
        mode: SiderealModeInfo(mode=mode, swe_mode=code, label=label)
        for mode, code, label in _MODE_TABLE
    }
)

DEFAULT_SIDEREAL_MODE: Final[SiderealMode] = SiderealMode.LAHIRI


def normalize_ayanamsa_name(value: str) -> str:
    """Return a canonical key for the provided ayanamsa name."""

    return value.strip().lower().replace("-", "_").replace("/", "_").replace(" ", "_")


def resolve_sidereal_mode(value: str | SiderealMode | None) -> SiderealMode:
    """Return the :class:`SiderealMode` for ``value`` (``None`` means Lahiri)."""

    if value is None:
        return DEFAULT_SIDEREAL_MODE
    if isinstance(value, SiderealMode):
        return value
    key = normalize_ayanamsa_name(value)
    for mode, info in SIDEREAL_MODES.items():
        if key in {mode.value, normalize_ayanamsa_name(info.label)}:
            return mode
    raise ValidationError(
        f"Unsupported ayanamsa '{value}'. Valid options: "
        f"{', '.join(mode.value for mode in SiderealMode)}",
        context={"ayanamsa": value},
    )
