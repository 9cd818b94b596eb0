"""Runtime configuration helpers.

Merges the persisted Settings with a scene's own size and optional CLI
overrides into the RuntimeConfig used by the command line front end.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .data.scenes import Scene
from .settings.schema import Settings
from .settings.store import SettingsStore


@dataclass(slots=True)
class RuntimeConfig:
    width: int
    height: int
    output: str
    log_level: str
    keep_going: bool = False


def make_runtime_config(
    *,
    args: Optional[object] = None,
    scene: Optional[Scene] = None,
    settings: Optional[Settings] = None,
) -> RuntimeConfig:
    """Build a RuntimeConfig from settings, *scene* and *args*.

    Rules:
    - Persisted Settings (SettingsStore.load()) provide the baseline.
    - A scene's width/height override the settings size.
    - CLI args (argparse.Namespace-like) override everything for the
      current run. Attributes that are missing or None are ignored.
    """
    if settings is None:
        settings = SettingsStore.load()

    cfg = RuntimeConfig(
        width=settings.width,
        height=settings.height,
        output=settings.output,
        log_level=settings.log_level,
    )

    if scene is not None:
        if scene.width is not None:
            cfg.width = scene.width
        if scene.height is not None:
            cfg.height = scene.height

    if args is not None:
        for attr in ("width", "height", "output", "log_level"):
            v = getattr(args, attr, None)
            if v is not None:
                setattr(cfg, attr, v)
        cfg.keep_going = bool(getattr(args, "keep_going", False))

    if cfg.width <= 0 or cfg.height <= 0:
        raise ValueError(f"surface size must be positive, got {cfg.width}x{cfg.height}")
    cfg.log_level = str(cfg.log_level).upper()
    return cfg
