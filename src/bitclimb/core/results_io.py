"""Result IO with format version guards."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .constants import RESULT_FORMAT_VERSION
from .encoding import as_index, format_binary
from .space import SolutionSpace
from .types import ClimbResult

META_FILENAME = "summary.json"


def result_summary(result: ClimbResult, space: SolutionSpace) -> Dict[str, Any]:
    """Flatten a result and its space into a JSON-serializable dict."""
    width = space.precision.l
    return {
        "x": space.round(result.x),
        "x_raw": result.x,
        "x_bin": format_binary(as_index(result.pattern), width),
        "f": result.score,
        "initial_bin": format_binary(as_index(result.initial_pattern), width),
        "n_accepted": result.n_accepted,
        "rounds": result.rounds,
        "history": result.history,
        "space": {
            "a": space.a,
            "b": space.b,
            "l": space.precision.l,
            "d": space.precision.d,
            "decimal_places": space.precision.decimal_places,
        },
    }


def save_result(
    outdir: Path,
    result: ClimbResult,
    space: SolutionSpace,
    extra: Dict[str, Any] | None = None,
) -> Path:
    """Save a climb result plus metadata with a format guard.

    Returns:
        Path of the written summary file.
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    summary = {
        **(extra or {}),
        **result_summary(result, space),
        "format_version": RESULT_FORMAT_VERSION,
    }
    path = outdir / META_FILENAME
    with open(path, "w") as f:
        json.dump(summary, f, indent=2)
    return path


def load_result(outdir: Path) -> dict:
    """Load a saved summary. Raises on incompatible format version."""
    summary_path = Path(outdir) / META_FILENAME
    if not summary_path.exists():
        raise FileNotFoundError(f"Missing {META_FILENAME} in {outdir}")

    with open(summary_path) as f:
        summary = json.load(f)

    version = summary.get("format_version")
    if version != RESULT_FORMAT_VERSION:
        raise ValueError(
            f"Result format version mismatch: file {version}, expected {RESULT_FORMAT_VERSION}"
        )

    if len(summary.get("x_bin", "")) != summary["space"]["l"]:
        raise ValueError(f"x_bin width mismatch: {summary.get('x_bin')!r} vs l={summary['space']['l']}")

    return summary
