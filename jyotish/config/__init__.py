"""Persistent settings for the chart engine."""

from __future__ import annotations

from .settings import (
    ChartCfg,
    EphemerisCfg,
    Settings,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "ChartCfg",
    "EphemerisCfg",
    "Settings",
    "config_path",
    "default_settings",
    "get_config_home",
    "load_settings",
    "save_settings",
]
