"""Module entrypoint for ``python -m lazylaunch``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and runtime setup happen in ``lazylaunch.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
