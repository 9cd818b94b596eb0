"""Scene document loader.

A scene is a JSON or YAML mapping with an optional surface size and an
ordered list of shapes::

    width: 12
    height: 12
    shapes:
      - {kind: rectangle, ll: [2, 2], ur: [5, 5], color: red}
      - {kind: circle, center: [5, 5], radius: 3, color: green}

The format is picked from the file suffix (``.json``, ``.yml``, ``.yaml``).
Shapes are validated structurally here; bounds and colors are only checked
when a shape is drawn, so a scene may legally reference a shape that will
fail to render.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shapecanvas.core.errors import SceneError
from shapecanvas.core.models import Shape
from shapecanvas.render.display import Display
from shapecanvas.render.shapes import draw_all

__all__ = ["Scene", "parse_scene", "load_scene", "render_scene"]

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yml", ".yaml"}


class Scene(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    shapes: List[Shape] = Field(default_factory=list)


def parse_scene(data: Any, *, source: Union[str, Path] = "<scene>") -> Scene:
    """Validate an already-decoded scene mapping."""
    if data is None:
        data = {}
    try:
        return Scene.model_validate(data)
    except ValidationError as exc:
        raise SceneError(Path(source), f"invalid scene: {exc}") from exc


def load_scene(path: Union[str, Path]) -> Scene:
    """Read and validate the scene at *path*.

    Raises:
        SceneError: unreadable file, malformed JSON/YAML or invalid content.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise SceneError(p, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SceneError(p, f"not valid UTF-8: {exc}") from exc

    try:
        if p.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise SceneError(p, f"cannot parse: {exc}") from exc

    scene = parse_scene(data, source=p)
    logger.debug("loaded %d shapes from %s", len(scene.shapes), p)
    return scene


def render_scene(
    scene: Scene,
    display: Optional[Display] = None,
    *,
    size: Optional[tuple[int, int]] = None,
) -> Display:
    """Draw every shape of *scene* onto a freshly initialized display.

    *size* overrides the scene's own width/height. Drawing stops at the
    first failing shape and its error propagates.
    """
    if size is None:
        if scene.width is None or scene.height is None:
            raise ValueError("scene has no size; pass size=(width, height)")
        size = (scene.width, scene.height)
    if display is None:
        display = Display()
    display.initialize(size[0], size[1])
    draw_all(scene.shapes, display)
    return display
