"""Error taxonomy for drawing, surface access and snapshot export.

Every fallible operation raises one of these. Shape draws validate bounds
and color before touching the surface, so a :class:`DrawError` raised after
filling has begun means some pixels may already be written; there is no
rollback.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "RasterError",
    "DrawError",
    "OutOfBoundsError",
    "InvalidColorError",
    "SurfaceNotReadyError",
    "ExportError",
    "SceneError",
]


class RasterError(Exception):
    """Base class for all shapecanvas errors."""


class DrawError(RasterError):
    """A shape or pixel operation could not be completed."""


class OutOfBoundsError(DrawError):
    """A shape or pixel access falls outside the surface."""

    def __init__(
        self,
        message: str = "attempt to draw out of bounds of the surface",
        *,
        x: int | None = None,
        y: int | None = None,
    ) -> None:
        super().__init__(message)
        self.x = x
        self.y = y


class InvalidColorError(DrawError):
    """A referenced color is absent from the color registry."""

    def __init__(self, color: object) -> None:
        super().__init__(f"invalid color: {color!r}")
        self.color = color


class SurfaceNotReadyError(RasterError):
    """The surface was used before ``initialize`` allocated its grid."""


class ExportError(RasterError):
    """A snapshot could not be created or written.

    The underlying :class:`OSError` is available as ``__cause__``.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot write snapshot {path}: {reason}")
        self.path = path


class SceneError(RasterError):
    """A scene document could not be read, parsed or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
