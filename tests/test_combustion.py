from __future__ import annotations

import pytest

from jyotish.bodies import Planet
from jyotish.vedic.combustion import (
    COMBUSTION_THRESHOLDS,
    DEFAULT_COMBUSTION_THRESHOLD,
    combustion_threshold,
    is_combust,
)


def test_moon_threshold_is_strict() -> None:
    assert not is_combust(Planet.MOON, 112.0, 100.0)
    assert is_combust(Planet.MOON, 111.999, 100.0)
    assert is_combust(Planet.MOON, 88.001, 100.0)


def test_sun_never_combust() -> None:
    assert not is_combust(Planet.SUN, 100.0, 100.0)


def test_separation_wraps_across_aries() -> None:
    assert is_combust(Planet.VENUS, 355.0, 4.0)
    assert not is_combust(Planet.VENUS, 355.0, 5.0)


@pytest.mark.parametrize(("planet", "orb"), sorted(COMBUSTION_THRESHOLDS.items()))
def test_configured_orbs(planet: Planet, orb: float) -> None:
    assert combustion_threshold(planet) == orb
    assert is_combust(planet, 50.0 + orb - 0.01, 50.0)
    assert not is_combust(planet, 50.0 + orb + 0.01, 50.0)


def test_unlisted_bodies_use_default_orb() -> None:
    assert combustion_threshold(Planet.URANUS) == DEFAULT_COMBUSTION_THRESHOLD
    assert is_combust(Planet.URANUS, 209.0, 200.0)
    assert not is_combust(Planet.URANUS, 210.0, 200.0)
