"""shapecanvas package root.

The project version is defined here as the single source of truth and
exposed via ``__version__``. The packaging configuration (pyproject.toml)
reads this attribute using ``version = { attr = "shapecanvas.__version__" }``.

The most common entry points are re-exported for convenience::

    from shapecanvas import Display, Rectangle

    display = Display(size=(10, 10))
    Rectangle(ll=(2, 2), ur=(5, 5), color="red").draw(display)
    display.export_snapshot("out/frame")
"""

from shapecanvas.core.colors import BACKGROUND, COLOR_NAMES, is_valid, rgb_of
from shapecanvas.core.errors import (
    DrawError,
    ExportError,
    InvalidColorError,
    OutOfBoundsError,
    RasterError,
    SceneError,
    SurfaceNotReadyError,
)
from shapecanvas.core.models import Circle, Point, Rectangle, Shape, Triangle
from shapecanvas.render.display import Display
from shapecanvas.render.surface import RasterSurface

__all__ = [
    "__version__",
    "BACKGROUND",
    "COLOR_NAMES",
    "Circle",
    "Display",
    "DrawError",
    "ExportError",
    "InvalidColorError",
    "OutOfBoundsError",
    "Point",
    "RasterError",
    "RasterSurface",
    "Rectangle",
    "SceneError",
    "Shape",
    "SurfaceNotReadyError",
    "Triangle",
    "is_valid",
    "rgb_of",
]

__version__ = "0.1.0"
