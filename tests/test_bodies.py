from __future__ import annotations

import pytest

from jyotish.bodies import (
    LUNAR_NODES,
    MAJOR_PLANETS,
    OUTER_PLANETS,
    SWE_BODY_IDS,
    TRADITIONAL_PLANETS,
    Planet,
)


def test_every_planet_has_unique_swiss_id() -> None:
    assert set(SWE_BODY_IDS) == set(Planet)
    assert sorted(SWE_BODY_IDS.values()) == list(range(len(Planet)))


def test_groups() -> None:
    assert len(TRADITIONAL_PLANETS) == 7
    assert MAJOR_PLANETS[:7] == TRADITIONAL_PLANETS
    assert set(OUTER_PLANETS) <= set(MAJOR_PLANETS)
    assert all(planet.is_node for planet in LUNAR_NODES)
    assert not Planet.SUN.is_node


@pytest.mark.parametrize("planet", list(Planet))
def test_from_swe_id_round_trip(planet: Planet) -> None:
    assert Planet.from_swe_id(planet.swe_id) is planet


def test_from_name_lookup() -> None:
    assert Planet.from_name("mean node") is Planet.MEAN_NODE
    assert Planet.from_name("MEAN_NODE") is Planet.MEAN_NODE
    assert Planet.from_name(" Jupiter ") is Planet.JUPITER
    assert Planet.from_name("Ketu") is None
    assert Planet.from_swe_id(99) is None
