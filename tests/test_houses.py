from __future__ import annotations

import pytest

from jyotish.ephemeris.provider import RawHouses
from jyotish.vedic.houses import (
    REFERENCE_HOUSE_SYSTEM,
    REFERENCE_HOUSE_SYSTEM_NAME,
    HouseSystem,
    build_house_system,
    house_of,
)

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

EQUAL_CUSPS = tuple(30.0 * i for i in range(12))
# Unequal quadrant-style cusps whose eleventh house crosses 0°.
WRAPPED_CUSPS = (40.0, 68.0, 95.0, 124.0, 158.0, 190.0, 220.0, 248.0, 275.0, 304.0, 338.0, 10.0)


@settings(deadline=None)
@given(
    longitude=st.floats(min_value=0.0, max_value=360.0, exclude_max=True, allow_nan=False),
    cusps=st.sampled_from([EQUAL_CUSPS, WRAPPED_CUSPS]),
)
def test_house_of_is_total(longitude: float, cusps: tuple[float, ...]) -> None:
    assert 1 <= house_of(cusps, longitude) <= 12


def test_equal_cusps_boundaries() -> None:
    assert house_of(EQUAL_CUSPS, 0.0) == 1
    assert house_of(EQUAL_CUSPS, 29.999) == 1
    assert house_of(EQUAL_CUSPS, 30.0) == 2
    assert house_of(EQUAL_CUSPS, 359.0) == 12


def test_wrapping_arc() -> None:
    assert house_of(WRAPPED_CUSPS, 350.0) == 11
    assert house_of(WRAPPED_CUSPS, 5.0) == 11
    assert house_of(WRAPPED_CUSPS, 10.0) == 12
    assert house_of(WRAPPED_CUSPS, 39.9) == 12
    assert house_of(WRAPPED_CUSPS, 40.0) == 1


def test_degenerate_cusps_fall_back_to_first_house() -> None:
    # Identical cusps make every arc wrap-shaped, so the first one claims everything.
    assert house_of((100.0,) * 12, 42.0) == 1


def test_build_house_system_applies_ayanamsa() -> None:
    raw = RawHouses(
        cusps=tuple((10.0 + 30.0 * i) % 360.0 for i in range(12)),
        ascendant=10.0,
        midheaven=280.0,
        system_code=REFERENCE_HOUSE_SYSTEM,
    )
    houses = build_house_system(raw, 24.0, requested_system="whole_sign")
    assert houses.system == REFERENCE_HOUSE_SYSTEM_NAME == "Placidus"
    assert houses.requested_system == "whole_sign"
    assert houses.ascendant == pytest.approx(346.0)
    assert houses.ascendant_sign == "Pisces"
    assert houses.midheaven == pytest.approx(256.0)
    assert houses.cusps[0] == pytest.approx(346.0)
    assert houses.cusps[1] == pytest.approx(16.0)
    assert houses.house_for_longitude(0.0) == 1
    assert houses.house_for_longitude(20.0) == 2
    assert houses.cusp(2) == houses.cusps[1]
    assert houses.to_dict()["requested_system"] == "whole_sign"


def test_house_system_requires_twelve_cusps() -> None:
    with pytest.raises(ValueError):
        HouseSystem(system="Placidus", cusps=(0.0, 30.0), ascendant=0.0, midheaven=270.0)
    houses = HouseSystem(system="Placidus", cusps=EQUAL_CUSPS, ascendant=0.0, midheaven=270.0)
    with pytest.raises(ValueError):
        houses.cusp(13)
