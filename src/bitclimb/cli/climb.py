"""Hill-climb CLI.

Usage:
    python -m bitclimb.cli.climb --a -4 --b 12 --d 0.001 --rounds 50
    python -m bitclimb.cli.climb --config run.yml --l 20 --seed 7

Outputs JSON with the best x (rounded to the space's decimal places), its
binary encoding and f(x) to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import numpy as np
from pydantic import ValidationError


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    space = {k: getattr(args, k) for k in ("a", "b", "d", "decimal_places", "l")}
    search = {"rounds": args.rounds, "seed": args.seed, "goal": args.goal}
    return {
        "space": {k: v for k, v in space.items() if v is not None},
        "search": {k: v for k, v in search.items() if v is not None},
    }


def main(argv: list[str] | None = None) -> int:
    """Run a single hill climb.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = invalid configuration or solution space).
    """
    parser = argparse.ArgumentParser(description="Bit-flip hill climbing over [a, b]")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--a", type=float, default=None, help="Lower bound of the range")
    parser.add_argument("--b", type=float, default=None, help="Upper bound of the range")
    precision = parser.add_mutually_exclusive_group()
    precision.add_argument("--d", type=float, default=None, help="Step size, e.g. 0.001")
    precision.add_argument("--decimal-places", type=int, default=None, help="Decimal places")
    precision.add_argument("--l", type=int, default=None, help="Bit-length of the encoding")
    parser.add_argument("--rounds", "-T", type=int, default=None, help="Number of rounds")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--goal", type=str, default=None, choices=["max", "min"])
    parser.add_argument("--outdir", type=str, default=None, help="Write summary.json here")
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    from ..core.config import build_space, default_config, load_config, merge_config
    from ..core.encoding import as_index, format_binary
    from ..core.results_io import save_result
    from ..core.types import SpaceConfigError
    from ..search.hill_climb import hill_climb

    try:
        base = load_config(args.config) if args.config else default_config()
        config = merge_config(base, _overrides(args))
    except ValidationError as e:
        print(f"error [invalid_config]: {e}", file=sys.stderr)
        return 2

    try:
        space = build_space(config.space)
    except SpaceConfigError as e:
        print(f"error [{e.rule}]: {e}", file=sys.stderr)
        return 2

    rng = np.random.default_rng(config.search.seed)
    result = hill_climb(space, config.search.rounds, rng, goal=config.search.goal)

    output = {
        "x": space.round(result.x),
        "x_bin": format_binary(as_index(result.pattern), space.precision.l),
        "f": round(result.score, max(space.precision.decimal_places, 0)),
        "l": space.precision.l,
        "d": space.precision.d,
        "decimal_places": space.precision.decimal_places,
    }

    if args.outdir:
        save_result(Path(args.outdir), result, space, {"config": config.model_dump(mode="json")})

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
