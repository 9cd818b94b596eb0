from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from shapecanvas.settings.schema import Settings
from shapecanvas.settings.store import SettingsStore


def test_load_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHAPECANVAS_HOME", str(tmp_path))
    s = SettingsStore.load()
    assert isinstance(s, Settings)
    assert (s.width, s.height) == (64, 64)
    assert s.output == "snapshot"
    assert s.log_level == "WARNING"


def test_roundtrip(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHAPECANVAS_HOME", str(tmp_path))
    s = Settings(width=32, height=24, output="frames/out", log_level="debug")
    SettingsStore.save(s)
    s2 = SettingsStore.load()
    assert (s2.width, s2.height) == (32, 24)
    assert s2.output == "frames/out"
    assert s2.log_level == "DEBUG"
    assert not SettingsStore.settings_path().with_suffix(".tmp").exists()


def test_corrupt_returns_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SHAPECANVAS_HOME", str(tmp_path))
    p = SettingsStore.settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("{broken")
    s = SettingsStore.load()
    assert s.width == 64


def test_invalid_values_return_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SHAPECANVAS_HOME", str(tmp_path))
    p = SettingsStore.settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps({"width": -3}))
    assert SettingsStore.load().width == 64


def test_default_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SHAPECANVAS_HOME", raising=False)
    p = SettingsStore.settings_path()
    assert p.name == "settings.json"
    assert p.parent.name == ".shapecanvas"


@pytest.mark.parametrize(
    "kwargs",
    [{"width": 0}, {"height": -1}, {"output": "  "}, {"log_level": "LOUD"}],
)
def test_schema_validation(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(**kwargs)
