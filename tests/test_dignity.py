from __future__ import annotations

import pytest

from jyotish.bodies import OUTER_PLANETS, TRADITIONAL_PLANETS, Planet
from jyotish.vedic.dignity import (
    CLASSICAL_DIGNITIES,
    Dignity,
    DignityTables,
    classify_dignity,
    debilitation_degree,
    exaltation_degree,
)


@pytest.mark.parametrize(
    ("planet", "sign", "expected"),
    [
        (Planet.SUN, 0, Dignity.EXALTED),
        (Planet.SUN, 6, Dignity.DEBILITATED),
        (Planet.SUN, 4, Dignity.OWN_SIGN),
        (Planet.MOON, 1, Dignity.EXALTED),
        (Planet.MOON, 3, Dignity.OWN_SIGN),
        (Planet.MERCURY, 5, Dignity.EXALTED),
        (Planet.MERCURY, 2, Dignity.OWN_SIGN),
        (Planet.VENUS, 5, Dignity.DEBILITATED),
        (Planet.MARS, 9, Dignity.EXALTED),
        (Planet.MARS, 7, Dignity.OWN_SIGN),
        (Planet.JUPITER, 3, Dignity.EXALTED),
        (Planet.SATURN, 0, Dignity.DEBILITATED),
        (Planet.SATURN, 10, Dignity.OWN_SIGN),
        (Planet.MEAN_NODE, 2, Dignity.EXALTED),
        (Planet.MEAN_NODE, 8, Dignity.DEBILITATED),
        (Planet.MEAN_NODE, 0, Dignity.NEUTRAL),
        (Planet.JUPITER, 4, Dignity.NEUTRAL),
    ],
)
def test_classical_table(planet: Planet, sign: int, expected: Dignity) -> None:
    assert classify_dignity(planet, sign) is expected


def test_moola_trikona_only_reached_without_own_sign() -> None:
    # Every classical moola trikona sign is also an own or exaltation sign.
    for planet in TRADITIONAL_PLANETS:
        sign = CLASSICAL_DIGNITIES.moola_trikona[planet]
        assert classify_dignity(planet, sign) is not Dignity.MOOLA_TRIKONA


def test_precedence_with_synthetic_tables() -> None:
    tables = DignityTables(
        exaltation={Planet.MARS: 4},
        debilitation={Planet.MARS: 4, Planet.VENUS: 2},
        own_signs={Planet.MARS: (4, 5), Planet.VENUS: (2, 3)},
        moola_trikona={Planet.MARS: 5, Planet.VENUS: 7},
    )
    assert classify_dignity(Planet.MARS, 4, tables=tables) is Dignity.EXALTED
    assert classify_dignity(Planet.VENUS, 2, tables=tables) is Dignity.DEBILITATED
    assert classify_dignity(Planet.MARS, 5, tables=tables) is Dignity.OWN_SIGN
    assert classify_dignity(Planet.VENUS, 7, tables=tables) is Dignity.MOOLA_TRIKONA
    assert classify_dignity(Planet.SUN, 0, tables=tables) is Dignity.NEUTRAL


@pytest.mark.parametrize("planet", OUTER_PLANETS)
def test_outer_planets_are_neutral_everywhere(planet: Planet) -> None:
    assert {classify_dignity(planet, sign) for sign in range(12)} == {Dignity.NEUTRAL}


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        CLASSICAL_DIGNITIES.exaltation[Planet.SUN] = 5  # type: ignore[index]


def test_labels() -> None:
    assert Dignity.EXALTED.english == "Exalted"
    assert Dignity.EXALTED.sanskrit == "Uchcha"
    assert Dignity.DEBILITATED.sanskrit == "Neecha"
    assert Dignity.NEUTRAL.english == "Neutral"


def test_degree_tables() -> None:
    assert exaltation_degree(Planet.SUN) == 10.0
    assert debilitation_degree(Planet.SUN) == 190.0
    assert debilitation_degree(Planet.VENUS) == 165.0
    assert debilitation_degree(Planet.JUPITER) == 278.0
    assert debilitation_degree(Planet.SATURN) == 20.0
    assert exaltation_degree(Planet.MEAN_NODE) is None
    assert debilitation_degree(Planet.URANUS) is None
    for planet in TRADITIONAL_PLANETS:
        exalted = exaltation_degree(planet)
        assert classify_dignity(planet, int(exalted // 30)) is Dignity.EXALTED
        assert classify_dignity(planet, int(debilitation_degree(planet) // 30)) is Dignity.DEBILITATED
