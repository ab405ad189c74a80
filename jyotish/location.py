"""Geographic observer location."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ValidationError

__all__ = ["GeoLocation", "dms_to_decimal"]


def dms_to_decimal(degrees: int, minutes: int, seconds: float, positive: bool) -> float:
    """Convert a degrees/minutes/seconds triple to signed decimal degrees."""

    decimal = abs(degrees) + minutes / 60.0 + seconds / 3600.0
    return decimal if positive else -decimal


def _split(value: float) -> tuple[int, int, float]:
    magnitude = abs(value)
    degrees = int(math.floor(magnitude))
    minutes_decimal = (magnitude - degrees) * 60.0
    minutes = int(math.floor(minutes_decimal))
    seconds = (minutes_decimal - minutes) * 60.0
    return degrees, minutes, seconds


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """Latitude/longitude in decimal degrees plus altitude in metres.

    Positive latitudes are north and positive longitudes east.  Values outside
    ``[-90, 90]`` and ``[-180, 180]`` raise :class:`ValidationError`.
    """

    latitude: float
    longitude: float
    altitude: float = 0.0

    def __post_init__(self) -> None:
        latitude = float(self.latitude)
        longitude = float(self.longitude)
        if not -90.0 <= latitude <= 90.0:
            raise ValidationError(
                f"Latitude must be between -90.0 and 90.0, got {self.latitude}",
                context={"field": "latitude", "value": self.latitude},
            )
        if not -180.0 <= longitude <= 180.0:
            raise ValidationError(
                f"Longitude must be between -180.0 and 180.0, got {self.longitude}",
                context={"field": "longitude", "value": self.longitude},
            )
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)
        object.__setattr__(self, "altitude", float(self.altitude))

    @classmethod
    def from_dms(
        cls,
        *,
        lat_degrees: int,
        lat_minutes: int,
        lat_seconds: float,
        is_north: bool,
        lon_degrees: int,
        lon_minutes: int,
        lon_seconds: float,
        is_east: bool,
        altitude: float = 0.0,
    ) -> GeoLocation:
        return cls(
            latitude=dms_to_decimal(lat_degrees, lat_minutes, lat_seconds, is_north),
            longitude=dms_to_decimal(lon_degrees, lon_minutes, lon_seconds, is_east),
            altitude=altitude,
        )

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> GeoLocation:
        try:
            latitude = float(payload["latitude"])
            longitude = float(payload["longitude"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError("location requires numeric latitude and longitude", cause=exc) from exc
        altitude = payload.get("altitude")
        return cls(
            latitude=latitude,
            longitude=longitude,
            altitude=float(altitude) if altitude is not None else 0.0,
        )

    @property
    def latitude_dms(self) -> dict[str, object]:
        degrees, minutes, seconds = _split(self.latitude)
        return {
            "degrees": degrees,
            "minutes": minutes,
            "seconds": seconds,
            "direction": "N" if self.latitude >= 0 else "S",
        }

    @property
    def longitude_dms(self) -> dict[str, object]:
        degrees, minutes, seconds = _split(self.longitude)
        return {
            "degrees": degrees,
            "minutes": minutes,
            "seconds": seconds,
            "direction": "E" if self.longitude >= 0 else "W",
        }

    def as_swe_geopos(self) -> tuple[float, float, float]:
        """Return ``(longitude, latitude, altitude)`` in Swiss argument order."""

        return (self.longitude, self.latitude, self.altitude)

    def label(self) -> str:
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"

    def to_dict(self) -> dict[str, float]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "altitude": self.altitude,
        }
