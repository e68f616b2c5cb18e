"""Module entrypoint for `python -m gui`.

Delegates to `gui.app.main` to show the mood chart window.
"""

from __future__ import annotations

import sys


def main():  # pragma: no cover - runtime delegation
    from .app import main as _main

    sys.exit(_main())


if __name__ == "__main__":  # pragma: no cover
    main()
