"""Scan-line and distance-based fills for the shape records.

Each fill validates bounds and color against the surface before writing a
single pixel. Once filling starts, the first failing ``set_pixel`` aborts
the draw and propagates; pixels already written are left in place.

Coordinates are integers throughout. Edge interpolation for triangles
truncates toward zero, which is the same as flooring since validated
coordinates are never negative.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple, Union

from shapecanvas.core.colors import is_valid
from shapecanvas.core.errors import InvalidColorError, OutOfBoundsError
from shapecanvas.core.models import Circle, Point, Rectangle, Triangle
from shapecanvas.render.surface import RasterSurface

__all__ = [
    "interpolate",
    "sort_by_y",
    "draw_rectangle",
    "draw_triangle",
    "draw_circle",
    "draw_shape",
    "draw_all",
]

logger = logging.getLogger(__name__)

AnyShape = Union[Rectangle, Triangle, Circle]


def _check_color(color: str) -> None:
    if not is_valid(color):
        raise InvalidColorError(color)


def _check_point(p: Point, surface: RasterSurface) -> None:
    width, height = surface.bounds()
    if p.x < 0 or p.x >= width or p.y < 0 or p.y >= height:
        raise OutOfBoundsError(
            f"vertex {p} outside surface {width}x{height}", x=p.x, y=p.y
        )


def interpolate(l0: int, d0: int, l1: int, d1: int) -> List[int]:
    """Sample *d* linearly over the integer range ``[l0, l1]``.

    Returns ``l1 - l0 + 1`` values ``int(d0 + i * (d1 - d0) / (l1 - l0))``.
    A zero-length span has no slope and yields ``[d0]``.
    """
    span = l1 - l0
    if span == 0:
        return [d0]
    delta = d1 - d0
    return [int(d0 + i * delta / span) for i in range(span + 1)]


def sort_by_y(
    p0: Point, p1: Point, p2: Point
) -> Tuple[Point, Point, Point]:
    """Order three vertices by ascending y with the swaps (0,1), (0,2), (1,2)."""
    if p1.y < p0.y:
        p0, p1 = p1, p0
    if p2.y < p0.y:
        p0, p2 = p2, p0
    if p2.y < p1.y:
        p1, p2 = p2, p1
    return p0, p1, p2


def draw_rectangle(rect: Rectangle, surface: RasterSurface) -> None:
    width, height = surface.bounds()
    ll, ur = rect.ll, rect.ur
    if ll.x < 0 or ll.y < 0 or ur.x >= width or ur.y >= height:
        raise OutOfBoundsError(
            f"rectangle {ll}-{ur} outside surface {width}x{height}"
        )
    _check_color(rect.color)

    for x in range(ll.x, ur.x):
        for y in range(ll.y, ur.y):
            surface.set_pixel(x, y, rect.color)


def draw_triangle(tri: Triangle, surface: RasterSurface) -> None:
    for p in (tri.p0, tri.p1, tri.p2):
        _check_point(p, surface)
    _check_color(tri.color)

    a, b, c = sort_by_y(tri.p0, tri.p1, tri.p2)

    # Long edge a->c against the two short edges a->b->c joined at b
    x02 = interpolate(a.y, a.x, c.y, c.x)
    x01 = interpolate(a.y, a.x, b.y, b.x)
    x12 = interpolate(b.y, b.x, c.y, c.x)
    x012 = x01[:-1] + x12

    mid = len(x012) // 2
    if x02[mid] < x012[mid]:
        left, right = x02, x012
    else:
        left, right = x012, x02

    for i, y in enumerate(range(a.y, c.y + 1)):
        for x in range(left[i], right[i] + 1):
            surface.set_pixel(x, y, tri.color)


def draw_circle(circ: Circle, surface: RasterSurface) -> None:
    width, height = surface.bounds()
    cx, cy, r = circ.center.x, circ.center.y, circ.radius
    if cx - r < 0 or cy - r < 0:
        raise OutOfBoundsError(f"circle at {circ.center} r={r} crosses the origin")
    if cx + r >= width or cy + r >= height:
        raise OutOfBoundsError(
            f"circle at {circ.center} r={r} outside surface {width}x{height}"
        )
    _check_color(circ.color)

    # Upper extent is exclusive; cells before cx-r / cy-r are always > r away
    r2 = r * r
    for y in range(cy - r, cy + r):
        dy = cy - y
        for x in range(cx - r, cx + r):
            dx = cx - x
            if dx * dx + dy * dy <= r2:
                surface.set_pixel(x, y, circ.color)


def draw_shape(shape: AnyShape, surface: RasterSurface) -> None:
    """Dispatch *shape* to its fill routine."""
    if not isinstance(shape, (Rectangle, Triangle, Circle)):
        raise TypeError(f"unsupported shape type: {type(shape).__name__}")
    logger.debug("draw %s", shape.describe())
    if isinstance(shape, Rectangle):
        draw_rectangle(shape, surface)
    elif isinstance(shape, Triangle):
        draw_triangle(shape, surface)
    else:
        draw_circle(shape, surface)


def draw_all(shapes: Iterable[AnyShape], surface: RasterSurface) -> int:
    """Draw *shapes* in order, stopping at the first failure.

    Returns the number of shapes drawn.
    """
    count = 0
    for shape in shapes:
        draw_shape(shape, surface)
        count += 1
    return count
