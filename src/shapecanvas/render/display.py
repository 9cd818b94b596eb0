"""In-memory raster surface with P3 snapshot export.

The grid is a single flat list of color names indexed ``x * height + y``.
Every write is bounds- and color-checked so the grid only ever holds
registry colors.

Example:
    from shapecanvas import Circle, Display

    display = Display(size=(12, 12))
    Circle(center=(5, 5), radius=3, color="green").draw(display)
    display.export_snapshot("/tmp/circle")  # writes /tmp/circle.ppm
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from shapecanvas.core.colors import BACKGROUND, Color, is_valid
from shapecanvas.core.errors import (
    ExportError,
    InvalidColorError,
    OutOfBoundsError,
    SurfaceNotReadyError,
)
from shapecanvas.render.ppm import encode_ppm, snapshot_path, write_ppm
from shapecanvas.render.surface import PathLike, RasterSurface

__all__ = ["Display"]

logger = logging.getLogger(__name__)


class Display(RasterSurface):
    """Concrete :class:`RasterSurface` backed by a flat color buffer.

    A display starts uninitialized; ``initialize`` (or passing ``size`` to
    the constructor) allocates the grid and clears it to white.
    """

    def __init__(self, size: Optional[Tuple[int, int]] = None) -> None:
        self._width = 0
        self._height = 0
        self._cells: List[Color] | None = None
        if size is not None:
            self.initialize(size[0], size[1])

    def initialize(self, width: int, height: int) -> None:
        for name, v in (("width", width), ("height", height)):
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"{name} must be an integer, got {v!r}")
            if v <= 0:
                raise ValueError(f"{name} must be > 0, got {v}")
        self._width, self._height = width, height
        self._cells = [BACKGROUND] * (width * height)
        logger.debug("initialized %dx%d surface", width, height)

    def bounds(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def _grid(self) -> List[Color]:
        if self._cells is None:
            raise SurfaceNotReadyError("surface used before initialize()")
        return self._cells

    def _index(self, x: int, y: int) -> int:
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            raise OutOfBoundsError(
                f"pixel ({x},{y}) outside surface {self._width}x{self._height}",
                x=x,
                y=y,
            )
        return x * self._height + y

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        cells = self._grid()
        idx = self._index(x, y)
        if not is_valid(color):
            raise InvalidColorError(color)
        cells[idx] = color

    def get_pixel(self, x: int, y: int) -> Color:
        cells = self._grid()
        color = cells[self._index(x, y)]
        if not is_valid(color):  # pragma: no cover - guarded by set_pixel
            raise InvalidColorError(color)
        return color

    def clear(self) -> None:
        cells = self._grid()
        cells[:] = [BACKGROUND] * len(cells)

    def columns(self) -> Iterator[Tuple[Color, ...]]:
        """Yield the colors of each x column as an immutable tuple."""
        cells = self._grid()
        h = self._height
        for x in range(self._width):
            yield tuple(cells[x * h : (x + 1) * h])

    def export_snapshot(self, path: PathLike) -> Path:
        """Write the grid as a P3 snapshot and return the file path.

        ``.ppm`` is appended to *path* when it has a different suffix.

        Raises:
            ExportError: the file or its directory could not be written.
        """
        self._grid()
        out = snapshot_path(path)
        text = encode_ppm(self._width, self._height, self.columns())
        try:
            write_ppm(out, text)
        except OSError as exc:
            logger.error("snapshot export to %s failed: %s", out, exc)
            raise ExportError(out, exc.strerror or str(exc)) from exc
        logger.debug("wrote %dx%d snapshot to %s", self._width, self._height, out)
        return out
