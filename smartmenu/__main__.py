"""Console entrypoint bridging to :mod:`smartmenu.app`."""

from __future__ import annotations

from typing import Optional

from .app import main as app_main


def main(argv: Optional[list[str]] = None) -> int:
    """Delegate execution to :func:`smartmenu.app.main`."""

    return app_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
