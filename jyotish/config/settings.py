"""Configuration models and helpers for chart engine settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..ephemeris.sidereal import DEFAULT_SIDEREAL_MODE, resolve_sidereal_mode

CURRENT_SETTINGS_SCHEMA_VERSION = 1

__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "ChartCfg",
    "EphemerisCfg",
    "Settings",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
    "save_settings",
]

# -------------------- Settings Schema --------------------


class EphemerisCfg(BaseModel):
    """Ephemeris source configuration."""

    backend: Literal["swiss", "moshier"] = "swiss"
    path: Optional[str] = None


class ChartCfg(BaseModel):
    """Defaults applied to every chart computed through the facade."""

    ayanamsa: str = DEFAULT_SIDEREAL_MODE.value
    house_system: Literal[
        "whole_sign",
        "placidus",
        "equal",
        "koch",
        "porphyry",
        "sripati",
    ] = "whole_sign"
    include_outer_planets: bool = False
    topocentric: bool = False

    @field_validator("ayanamsa", mode="before")
    @classmethod
    def _normalize_ayanamsa(cls, value: object) -> str:
        return resolve_sidereal_mode(str(value)).value


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    ephemeris: EphemerisCfg = Field(default_factory=EphemerisCfg)
    chart: ChartCfg = Field(default_factory=ChartCfg)


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    if os.name == "nt":
        base = Path(os.environ.get("LOCALAPPDATA", str(Path.home() / "AppData" / "Local")))
        return base / "Jyotish"
    return Path(os.environ.get("JYOTISH_HOME", str(Path.home() / ".jyotish")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raw = {}
    return Settings(**raw)
