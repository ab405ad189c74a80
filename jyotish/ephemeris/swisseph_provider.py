"""Swiss Ephemeris implementation of :class:`EphemerisProvider`."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from time import perf_counter

from ..bodies import Planet
from ..errors import EphemerisError, NotInitializedError
from ..location import GeoLocation
from ..observability import COMPUTE_ERRORS, EPHEMERIS_CALL_DURATION
from .flags import CalculationFlags
from .paths import get_se_ephe_path
from .provider import RawHouses, RawSample
from .sidereal import SiderealMode
from .swe import swe

__all__ = ["SwissEphemerisProvider", "SUPPORTED_BACKENDS"]

LOG = logging.getLogger(__name__)

SUPPORTED_BACKENDS: tuple[str, ...] = ("swiss", "moshier")


class SwissEphemerisProvider:
    """Thin, stateless wrapper around ``pyswisseph``.

    Every position is requested tropical and geocentric unless the caller
    asks for a topocentric observer. ``ayanamsa`` is the only call that
    touches the global sidereal mode of the library.
    """

    def __init__(
        self,
        ephemeris_path: str | os.PathLike[str] | None = None,
        *,
        backend: str = "swiss",
    ) -> None:
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported backend '{backend}'. Valid options: {', '.join(SUPPORTED_BACKENDS)}"
            )
        self._requested_path = ephemeris_path
        self.backend = backend
        self.ephemeris_path: str | None = None
        self._initialized = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Load the extension module and configure the ephemeris search path."""

        if self._initialized:
            return
        module = swe()
        path = get_se_ephe_path(self._requested_path)
        if path is None and self._requested_path is not None:
            path = str(self._requested_path)
        if path is not None:
            module.set_ephe_path(path)
        self.ephemeris_path = path
        self._initialized = True
        LOG.info(
            {
                "event": "ephemeris_initialized",
                "backend": self.backend,
                "path": path,
                "version": self.version,
            }
        )

    def close(self) -> None:
        if not self._initialized:
            return
        swe.close()
        self._initialized = False
        LOG.debug({"event": "ephemeris_closed", "backend": self.backend})

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def version(self) -> str:
        return str(getattr(swe(), "version", "unknown"))

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise NotInitializedError(
                "SwissEphemerisProvider.initialize() must be called before use"
            )

    # ------------------------------------------------------------------
    # Provider protocol
    # ------------------------------------------------------------------
    @staticmethod
    def julian_day(moment: datetime) -> float:
        """Return the Julian day (UT) for a timezone-aware :class:`datetime`."""

        if moment.tzinfo is None or moment.tzinfo.utcoffset(moment) is None:
            raise ValueError(
                "datetime must be timezone-aware in UTC or convertible to UTC"
            )
        moment_utc = moment.astimezone(UTC)
        hour = (
            moment_utc.hour
            + moment_utc.minute / 60.0
            + moment_utc.second / 3600.0
            + moment_utc.microsecond / 3.6e9
        )
        return swe.julday(moment_utc.year, moment_utc.month, moment_utc.day, hour)

    def sample_planet(
        self,
        planet: Planet,
        julian_day: float,
        flags: CalculationFlags,
        *,
        observer: GeoLocation | None = None,
    ) -> RawSample:
        self._require_initialized()
        if self.backend == "moshier" and flags.use_swiss_ephemeris:
            flags = flags.replace(use_swiss_ephemeris=False)
        if flags.use_topocentric:
            if observer is None:
                raise EphemerisError(
                    "topocentric request requires an observer location",
                    body=planet.display_name,
                    julian_day=julian_day,
                )
            swe.set_topo(*observer.as_swe_geopos())

        start = perf_counter()
        try:
            values, _retflag = swe.calc_ut(julian_day, planet.swe_id, flags.to_swe_flags())
            return RawSample.from_sequence(values)
        except EphemerisError:
            raise
        except Exception as exc:
            COMPUTE_ERRORS.labels(component="ephemeris_planet", error=exc.__class__.__name__).inc()
            raise EphemerisError(
                f"Swiss Ephemeris failed for {planet.display_name} at JD {julian_day}: {exc}",
                body=planet.display_name,
                julian_day=julian_day,
            ) from exc
        finally:
            EPHEMERIS_CALL_DURATION.labels(
                provider=self.__class__.__name__, call="sample_planet"
            ).observe(perf_counter() - start)

    def ayanamsa(self, julian_day: float, mode: SiderealMode) -> float:
        self._require_initialized()
        start = perf_counter()
        try:
            swe.set_sid_mode(mode.swe_mode, 0.0, 0.0)
            return float(swe.get_ayanamsa_ut(julian_day))
        except Exception as exc:
            COMPUTE_ERRORS.labels(component="ephemeris_ayanamsa", error=exc.__class__.__name__).inc()
            raise EphemerisError(
                f"Swiss Ephemeris ayanamsa failed for {mode.label} at JD {julian_day}: {exc}",
                julian_day=julian_day,
            ) from exc
        finally:
            EPHEMERIS_CALL_DURATION.labels(
                provider=self.__class__.__name__, call="ayanamsa"
            ).observe(perf_counter() - start)

    def houses(
        self,
        julian_day: float,
        latitude: float,
        longitude: float,
        system_code: str,
    ) -> RawHouses:
        self._require_initialized()
        start = perf_counter()
        try:
            cusps, angles = swe.houses_ex(
                julian_day, latitude, longitude, system_code.encode("ascii")
            )
            # Older bindings prefix a dummy cusp at index 0.
            if len(cusps) == 13:
                cusps = cusps[1:]
            return RawHouses(
                cusps=tuple(cusps[:12]),
                ascendant=float(angles[0]),
                midheaven=float(angles[1]),
                system_code=system_code,
            )
        except Exception as exc:
            COMPUTE_ERRORS.labels(component="ephemeris_houses", error=exc.__class__.__name__).inc()
            raise EphemerisError(
                f"Swiss Ephemeris houses failed at JD {julian_day} "
                f"({latitude:.4f}, {longitude:.4f}): {exc}",
                julian_day=julian_day,
            ) from exc
        finally:
            EPHEMERIS_CALL_DURATION.labels(
                provider=self.__class__.__name__, call="houses"
            ).observe(perf_counter() - start)

    def __enter__(self) -> SwissEphemerisProvider:
        self.initialize()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
