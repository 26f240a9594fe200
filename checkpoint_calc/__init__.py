"""Package utilities for checkpoint-calc.

The engine lives in top-level packages like `commands/`, `runtime/` and
`storage/`. This package exists to expose the installed version and the
console entry point (`checkpoint-calc`).
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("checkpoint-calc")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"


def cli() -> None:
    """Entry point used by the ``checkpoint-calc`` console script."""
    from main import main

    main()
