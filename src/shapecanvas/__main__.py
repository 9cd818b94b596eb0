"""Console entrypoint for shapecanvas.

``python -m shapecanvas`` and the installed ``shapecanvas`` console script
both run :func:`shapecanvas.cli.main`.
"""

from __future__ import annotations

import sys

from shapecanvas.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`shapecanvas.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
