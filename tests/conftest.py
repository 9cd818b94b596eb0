from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from shapecanvas.render.display import Display


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # Keep tests away from the real ~/.shapecanvas settings
    home = tmp_path / "home"
    monkeypatch.setenv("SHAPECANVAS_HOME", str(home))
    return home


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path) -> Callable[[str], Any]:
    def _load(name: str) -> Any:
        with (fixtures_dir / name).open("r", encoding="utf-8") as f:
            return json.load(f)

    return _load


@pytest.fixture
def display() -> Display:
    return Display(size=(10, 10))


@pytest.fixture
def filled() -> Callable[[Display, str], set[tuple[int, int]]]:
    """Return a helper listing the coordinates that hold a color."""

    def _filled(display: Display, color: str) -> set[tuple[int, int]]:
        w, h = display.bounds()
        return {
            (x, y)
            for x in range(w)
            for y in range(h)
            if display.get_pixel(x, y) == color
        }

    return _filled
