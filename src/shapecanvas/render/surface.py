"""Raster surface protocol consumed by the shape fills.

Shapes only ever talk to this contract; they never see how a surface stores
its pixels. :class:`shapecanvas.render.display.Display` is the concrete
implementation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Tuple, Union

from shapecanvas.core.colors import Color

PathLike = Union[str, Path]


class RasterSurface(Protocol):
    def initialize(self, width: int, height: int) -> None:
        ...

    def bounds(self) -> Tuple[int, int]:
        ...

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        ...

    def get_pixel(self, x: int, y: int) -> Color:
        ...

    def clear(self) -> None:
        ...

    def export_snapshot(self, path: PathLike) -> Path:
        ...
