"""CLI modules for running the hill climb.

Note: avoid importing submodules at import-time. This keeps `python -m bitclimb.cli.<cmd>`
free of `runpy` warnings and avoids side effects from eager imports.
"""

from __future__ import annotations


def climb_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `bitclimb.cli.climb.main`."""

    from .climb import main

    return main(argv)


__all__ = ["climb_main"]
