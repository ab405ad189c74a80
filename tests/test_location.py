from __future__ import annotations

import pytest

from jyotish.errors import ErrorKind, ValidationError
from jyotish.location import GeoLocation, dms_to_decimal


def test_valid_location_round_trips_through_dict() -> None:
    location = GeoLocation(latitude=27.7172, longitude=85.3240, altitude=1400)
    assert location.altitude == 1400.0
    assert GeoLocation.from_dict(location.to_dict()) == location
    assert location.as_swe_geopos() == (85.3240, 27.7172, 1400.0)


@pytest.mark.parametrize(
    ("latitude", "longitude", "field"),
    [(90.5, 0.0, "latitude"), (-91.0, 0.0, "latitude"), (0.0, 180.01, "longitude")],
)
def test_out_of_range_coordinates_rejected(latitude: float, longitude: float, field: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        GeoLocation(latitude=latitude, longitude=longitude)
    assert excinfo.value.kind is ErrorKind.VALIDATION_FAILURE
    assert excinfo.value.context["field"] == field


def test_boundaries_are_inclusive() -> None:
    GeoLocation(latitude=-90.0, longitude=180.0)
    GeoLocation(latitude=90.0, longitude=-180.0)


def test_from_dms_and_back() -> None:
    location = GeoLocation.from_dms(
        lat_degrees=28,
        lat_minutes=36,
        lat_seconds=50.0,
        is_north=True,
        lon_degrees=77,
        lon_minutes=12,
        lon_seconds=32.4,
        is_east=True,
    )
    assert location.latitude == pytest.approx(28.6139, abs=1e-4)
    assert location.longitude == pytest.approx(77.2090, abs=1e-4)
    assert location.latitude_dms["direction"] == "N"
    assert location.latitude_dms["degrees"] == 28
    assert location.longitude_dms["minutes"] == 12


def test_southern_western_directions() -> None:
    location = GeoLocation(latitude=-33.5, longitude=-70.25)
    assert location.latitude_dms["direction"] == "S"
    assert location.longitude_dms["direction"] == "W"
    assert dms_to_decimal(33, 30, 0.0, False) == -33.5


def test_from_dict_requires_numbers() -> None:
    with pytest.raises(ValidationError):
        GeoLocation.from_dict({"latitude": "north"})


@pytest.mark.parametrize(
    ("latitude", "longitude", "expected"),
    [
        (27.7172, 85.324, "27.7172°N, 85.3240°E"),
        (-33.5, -70.25, "33.5000°S, 70.2500°W"),
        (51.5, -0.1276, "51.5000°N, 0.1276°W"),
        (0.0, 0.0, "0.0000°N, 0.0000°E"),
    ],
)
def test_label_uses_hemisphere_directions(latitude: float, longitude: float, expected: str) -> None:
    assert GeoLocation(latitude=latitude, longitude=longitude).label() == expected
