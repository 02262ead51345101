from __future__ import annotations

from pathlib import Path

import pytest

from roomscan.exceptions import ConfigurationError
from roomscan.geometry import contract
from roomscan.settings import Settings, ToleranceSettings, get_settings


def test_tolerance_defaults_match_contract() -> None:
    tol = ToleranceSettings()
    assert tol.toilet_gap_max_m == contract.TOILET_GAP_MAX
    assert tol.wall_gap_max_m == contract.WALL_GAP_MAX
    assert tol.crooked_min_rad == contract.CROOKED_MIN_DEVIATION
    assert tol.door_clearance_m == contract.DOOR_CLEARANCE


def test_load_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(
        "tolerances:\n  nib_wall_max_m: 0.5\nlogging:\n  level: debug\n  json_format: true\n",
        encoding="utf-8",
    )
    settings = Settings.load(path)
    assert settings.tolerances.nib_wall_max_m == 0.5
    assert settings.tolerances.tub_gap_max_m == contract.TUB_GAP_MAX
    assert settings.logging.level == "DEBUG"
    assert settings.logging.json_format is True


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert Settings.load(path) == Settings()


def test_env_var_selects_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "env.yaml"
    path.write_text("tolerances:\n  exterior_perimeter_m: 1.25\n", encoding="utf-8")
    monkeypatch.setenv("ROOMSCAN_CONFIG", str(path))
    assert Settings.load().tolerances.exterior_perimeter_m == 1.25


def test_missing_default_file_gives_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ROOMSCAN_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    assert Settings.load() == Settings()


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        Settings.load(tmp_path / "nope.yaml")
    assert excinfo.value.details["path"].endswith("nope.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "tolerances: [1, 2\n",
        "tolerances:\n  wall_gap_min_m: 0.5\n  wall_gap_max_m: 0.1\n",
        "tolerances:\n  colinear_parallel_cosine: 1.5\n",
        "- just\n- a list\n",
    ],
    ids=["bad-yaml", "inverted-band", "out-of-range", "not-a-mapping"],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        Settings.load(path)


def test_get_settings_is_cached(tmp_path: Path) -> None:
    path = tmp_path / "cached.yaml"
    path.write_text("tolerances:\n  nib_wall_max_m: 0.4\n", encoding="utf-8")
    get_settings.cache_clear()
    try:
        first = get_settings(str(path))
        assert get_settings(str(path)) is first
        assert first.tolerances.nib_wall_max_m == 0.4
    finally:
        get_settings.cache_clear()
