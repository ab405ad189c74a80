"""Vedic chart derivation: positions, combustion, dignity, houses and nodes."""

from __future__ import annotations

from .chart import VedicChart, VedicPlanetInfo, compute_vedic_chart
from .combustion import COMBUSTION_THRESHOLDS, DEFAULT_COMBUSTION_THRESHOLD, is_combust
from .dignity import (
    CLASSICAL_DIGNITIES,
    Dignity,
    DignityTables,
    classify_dignity,
    debilitation_degree,
    exaltation_degree,
)
from .houses import REFERENCE_HOUSE_SYSTEM, HouseSystem, build_house_system, house_of
from .nodes import KetuPosition
from .positions import PlanetPosition, compute_planet_position

__all__ = [
    "CLASSICAL_DIGNITIES",
    "COMBUSTION_THRESHOLDS",
    "DEFAULT_COMBUSTION_THRESHOLD",
    "Dignity",
    "DignityTables",
    "HouseSystem",
    "KetuPosition",
    "PlanetPosition",
    "REFERENCE_HOUSE_SYSTEM",
    "VedicChart",
    "VedicPlanetInfo",
    "build_house_system",
    "classify_dignity",
    "compute_planet_position",
    "compute_vedic_chart",
    "debilitation_degree",
    "exaltation_degree",
    "house_of",
    "is_combust",
]
