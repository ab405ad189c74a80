from __future__ import annotations

from pathlib import Path

import pydantic
import pytest
import yaml

from jyotish.config.settings import (
    CONFIG_FILENAME,
    ChartCfg,
    Settings,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)


@pytest.fixture
def jyotish_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("JYOTISH_HOME", str(tmp_path))
    return tmp_path


def test_defaults() -> None:
    settings = default_settings()
    assert settings.chart.ayanamsa == "lahiri"
    assert settings.chart.house_system == "whole_sign"
    assert settings.chart.include_outer_planets is False
    assert settings.ephemeris.backend == "swiss"
    assert settings.ephemeris.path is None


def test_ayanamsa_names_are_normalised() -> None:
    assert ChartCfg(ayanamsa="True Citra").ayanamsa == "true_citra"
    assert ChartCfg(ayanamsa="Fagan/Bradley").ayanamsa == "fagan_bradley"
    with pytest.raises(pydantic.ValidationError):
        ChartCfg(ayanamsa="unknown")


def test_config_home_respects_env(jyotish_home: Path) -> None:
    assert get_config_home() == jyotish_home
    assert config_path() == jyotish_home / CONFIG_FILENAME


def test_load_creates_defaults(jyotish_home: Path) -> None:
    settings = load_settings()
    assert settings == default_settings()
    assert (jyotish_home / CONFIG_FILENAME).exists()


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.yaml"
    settings = Settings.model_validate(
        {
            "ephemeris": {"backend": "moshier", "path": "/data/ephe"},
            "chart": {"ayanamsa": "raman", "topocentric": True},
        }
    )
    save_settings(settings, target)
    payload = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert payload["chart"]["ayanamsa"] == "raman"
    assert load_settings(target) == settings


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    target = tmp_path / "config.yaml"
    target.write_text("", encoding="utf-8")
    assert load_settings(target) == default_settings()
