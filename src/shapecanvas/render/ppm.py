"""Plain-text (P3) snapshot encoder.

Layout::

    P3
    <width> <height>
    255
    r g b r g b ... (one line per x column, ``height`` triplets each)

The first grid axis (x) varies slowest, so each body line is a column of
the surface rather than a conventional image row. Every triplet is followed
by a single space, including the last one on a line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, Union

from shapecanvas.core.colors import Color, rgb_of
from shapecanvas.core.errors import ExportError

__all__ = ["MAGIC", "MAX_VALUE", "SUFFIX", "encode_ppm", "snapshot_path", "write_ppm"]

MAGIC = "P3"
MAX_VALUE = 255
SUFFIX = ".ppm"


def encode_ppm(width: int, height: int, columns: Iterable[Sequence[Color]]) -> str:
    """Return the P3 text for a ``width`` x ``height`` grid.

    *columns* yields one sequence of ``height`` colors per x index.
    """
    lines = [MAGIC, f"{width} {height}", str(MAX_VALUE)]
    for column in columns:
        parts = []
        for color in column:
            r, g, b = rgb_of(color)
            parts.append(f"{r} {g} {b} ")
        lines.append("".join(parts))
    return "\n".join(lines) + "\n"


def snapshot_path(path: Union[str, Path]) -> Path:
    """Return *path* with the ``.ppm`` suffix appended when missing.

    Raises:
        ExportError: *path* has no file name (empty, ``.`` or a root).
    """
    p = Path(path)
    if not p.name:
        raise ExportError(p, "path has no file name")
    if p.suffix.lower() == SUFFIX:
        return p
    return p.with_name(p.name + SUFFIX)


def write_ppm(path: Path, text: str) -> None:
    """Write *text* to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="ascii", newline="\n") as f:
        f.write(text)
