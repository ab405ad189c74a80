"""High level entry point wiring settings, provider and chart assembly."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from datetime import datetime

from .bodies import MAJOR_PLANETS, Planet
from .config.settings import Settings, default_settings
from .ephemeris.flags import CalculationFlags
from .ephemeris.provider import EphemerisProvider
from .ephemeris.sidereal import resolve_sidereal_mode
from .ephemeris.swisseph_provider import SwissEphemerisProvider
from .errors import CalculationError, JyotishError, NotInitializedError
from .location import GeoLocation
from .vedic.chart import VedicChart, compute_vedic_chart
from .vedic.positions import PlanetPosition, compute_planet_position

__all__ = ["Jyotish"]

LOG = logging.getLogger(__name__)


class Jyotish:
    """Facade over an :class:`EphemerisProvider`.

    Instances are independent; create one per configuration. When no provider
    is injected a :class:`SwissEphemerisProvider` is built from ``settings``
    during :meth:`initialize`.
    """

    def __init__(
        self,
        provider: EphemerisProvider | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or default_settings()
        self._provider = provider
        self._initialized = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self, ephemeris_path: str | os.PathLike[str] | None = None) -> None:
        if self._initialized:
            return
        if self._provider is None:
            self._provider = SwissEphemerisProvider(
                ephemeris_path or self.settings.ephemeris.path,
                backend=self.settings.ephemeris.backend,
            )
        setup = getattr(self._provider, "initialize", None)
        if callable(setup):
            try:
                setup()
            except JyotishError:
                raise
            except Exception as exc:
                raise NotInitializedError(
                    "Failed to initialize ephemeris provider", cause=exc
                ) from exc
        self._initialized = True
        LOG.info(
            {
                "event": "jyotish_initialized",
                "provider": self._provider.__class__.__name__,
            }
        )

    def close(self) -> None:
        if self._provider is not None:
            teardown = getattr(self._provider, "close", None)
            if callable(teardown):
                teardown()
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def _require_provider(self) -> EphemerisProvider:
        if not self._initialized or self._provider is None:
            raise NotInitializedError(
                "Jyotish.initialize() must be called before calculating positions"
            )
        return self._provider

    def _default_flags(self) -> CalculationFlags:
        chart_cfg = self.settings.chart
        return CalculationFlags(
            use_swiss_ephemeris=self.settings.ephemeris.backend == "swiss",
            sidereal_mode=resolve_sidereal_mode(chart_cfg.ayanamsa),
            use_topocentric=chart_cfg.topocentric,
        )

    def _julian_day(self, provider: EphemerisProvider, moment: datetime) -> float:
        try:
            return provider.julian_day(moment)
        except ValueError:
            raise
        except Exception as exc:
            raise CalculationError("Failed to convert moment to Julian day", cause=exc) from exc

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------
    def planet_position(
        self,
        planet: Planet,
        moment: datetime,
        location: GeoLocation | None = None,
        *,
        flags: CalculationFlags | None = None,
    ) -> PlanetPosition:
        """Return the sidereal position of ``planet`` at ``moment``."""

        return self.planet_positions((planet,), moment, location, flags=flags)[planet]

    def planet_positions(
        self,
        planets: Iterable[Planet],
        moment: datetime,
        location: GeoLocation | None = None,
        *,
        flags: CalculationFlags | None = None,
    ) -> dict[Planet, PlanetPosition]:
        """Return sidereal positions for ``planets`` sharing one ayanamsa."""

        provider = self._require_provider()
        request_flags = flags or self._default_flags()
        jd = self._julian_day(provider, moment)
        try:
            ayanamsa = provider.ayanamsa(jd, request_flags.sidereal_mode)
        except JyotishError:
            raise
        except Exception as exc:
            raise CalculationError(
                "Failed to calculate ayanamsa",
                cause=exc,
                context={"julian_day": jd, "mode": request_flags.sidereal_mode.value},
            ) from exc
        observer = location if request_flags.use_topocentric else None
        return {
            planet: compute_planet_position(
                provider, planet, jd, ayanamsa, flags=request_flags, observer=observer
            )
            for planet in dict.fromkeys(planets)
        }

    def all_planet_positions(
        self,
        moment: datetime,
        location: GeoLocation | None = None,
        *,
        flags: CalculationFlags | None = None,
    ) -> dict[Planet, PlanetPosition]:
        return self.planet_positions(MAJOR_PLANETS, moment, location, flags=flags)

    # ------------------------------------------------------------------
    # Charts
    # ------------------------------------------------------------------
    def vedic_chart(
        self,
        moment: datetime,
        location: GeoLocation,
        *,
        house_system: str | None = None,
        ayanamsa: str | None = None,
        include_outer_planets: bool | None = None,
    ) -> VedicChart:
        """Compute a :class:`VedicChart`; unset options come from settings."""

        provider = self._require_provider()
        chart_cfg = self.settings.chart
        flags = self._default_flags()
        if ayanamsa is not None:
            flags = flags.replace(sidereal_mode=resolve_sidereal_mode(ayanamsa))
        return compute_vedic_chart(
            provider,
            self._julian_day(provider, moment),
            location,
            house_system=house_system or chart_cfg.house_system,
            ayanamsa_mode=flags.sidereal_mode,
            include_outer_planets=(
                chart_cfg.include_outer_planets
                if include_outer_planets is None
                else include_outer_planets
            ),
            flags=flags,
            moment=moment,
        )

    def __enter__(self) -> Jyotish:
        self.initialize()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
