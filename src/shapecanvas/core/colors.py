"""Fixed color registry.

Maps each recognized color name to its RGB triplet. This table is the only
source of truth for whether a color is valid; nothing registers colors at
runtime and the mapping itself is read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import InvalidColorError

__all__ = ["Color", "RGB", "COLORS", "COLOR_NAMES", "BACKGROUND", "is_valid", "rgb_of"]

Color = str
RGB = Tuple[int, int, int]

COLORS: Mapping[Color, RGB] = MappingProxyType(
    {
        "red": (255, 0, 0),
        "green": (0, 255, 0),
        "blue": (0, 0, 255),
        "yellow": (255, 255, 0),
        "orange": (255, 164, 0),
        "purple": (128, 0, 128),
        "brown": (165, 42, 42),
        "black": (0, 0, 0),
        "white": (255, 255, 255),
    }
)

COLOR_NAMES: Tuple[Color, ...] = tuple(COLORS)

# Cells hold this after initialize() and clear()
BACKGROUND: Color = "white"


def is_valid(color: object) -> bool:
    """Return True when *color* names a registry color."""
    return isinstance(color, str) and color in COLORS


def rgb_of(color: object) -> RGB:
    """Return the RGB triplet for *color*.

    Raises:
        InvalidColorError: if *color* is not in the registry.
    """
    if not is_valid(color):
        raise InvalidColorError(color)
    return COLORS[color]  # type: ignore[index]
