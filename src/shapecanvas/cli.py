"""Command-line interface for shapecanvas.

Renders a scene file (JSON or YAML) onto a fresh surface and exports it as
a P3 snapshot::

    shapecanvas scene.yml -o out/frame --log-level DEBUG

Exit status is 0 on success, 1 when a shape fails to draw and 2 when the
scene cannot be loaded or the snapshot cannot be written.
"""

from __future__ import annotations

import argparse
import logging
import sys

from shapecanvas import __version__
from shapecanvas.config import make_runtime_config
from shapecanvas.core.errors import DrawError, ExportError, SceneError
from shapecanvas.data.scenes import load_scene
from shapecanvas.render.display import Display
from shapecanvas.render.shapes import draw_shape
from shapecanvas.settings.schema import Settings
from shapecanvas.settings.store import SettingsStore

logger = logging.getLogger("shapecanvas.cli")

EXIT_OK = 0
EXIT_DRAW_FAILED = 1
EXIT_BAD_INPUT = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shapecanvas",
        description="Rasterize a scene of rectangles, triangles and circles.",
    )
    parser.add_argument("scene", help="scene file (.json, .yml or .yaml)")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="snapshot path; .ppm is appended when missing (default: settings)",
    )
    parser.add_argument("--width", type=int, default=None, help="surface width")
    parser.add_argument("--height", type=int, default=None, help="surface height")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="logging level (default: settings)",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="log and skip shapes that fail to draw instead of aborting",
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="store this run's size, output and log level as the new defaults",
    )
    parser.add_argument(
        "--version", action="version", version=f"shapecanvas {__version__}"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Synchronous entrypoint; returns the process exit status."""
    args = parse_args(argv)

    try:
        scene = load_scene(args.scene)
        cfg = make_runtime_config(args=args, scene=scene)
    except (SceneError, ValueError) as exc:
        print(f"shapecanvas: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    display = Display(size=(cfg.width, cfg.height))
    failed = 0
    for shape in scene.shapes:
        try:
            draw_shape(shape, display)
        except DrawError as exc:
            failed += 1
            logger.error("%s: %s", shape.describe(), exc)
            if not cfg.keep_going:
                return EXIT_DRAW_FAILED
    if failed:
        logger.warning("skipped %d of %d shapes", failed, len(scene.shapes))

    try:
        out = display.export_snapshot(cfg.output)
    except ExportError as exc:
        print(f"shapecanvas: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.save_settings:
        defaults = Settings(
            width=cfg.width,
            height=cfg.height,
            output=cfg.output,
            log_level=cfg.log_level,
        )
        try:
            SettingsStore.save(defaults)
        except OSError as exc:
            print(f"shapecanvas: cannot save settings: {exc}", file=sys.stderr)
            return EXIT_BAD_INPUT
        logger.info("saved defaults to %s", SettingsStore.settings_path())

    print(out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
