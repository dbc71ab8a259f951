"""Objective function.

    f(x) = frac(x) * (cos(20*pi*x) - sin(x))

frac is the truncating fractional part x - trunc(x): for negative
non-integer x it is negative (frac(-1.25) == -0.25), not the floor-based
remainder.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .encoding import as_index, decode
from .space import SolutionSpace
from .types import BitPattern

Objective = Callable[[float], float]


def frac(x: np.ndarray | float) -> np.ndarray | float:
    """Fractional part with the sign of x."""
    return np.fmod(x, 1.0)


def objective(x: np.ndarray | float) -> np.ndarray | float:
    """Objective function evaluated on real values (scalar or array)."""
    return frac(x) * (np.cos(20.0 * np.pi * x) - np.sin(x))


def objective_bin(pattern: BitPattern, space: SolutionSpace, f: Objective = objective) -> float:
    """Evaluate an objective on an encoded candidate.

    Args:
        pattern: Encoded candidate.
        space: Space used to decode the pattern.
        f: Objective of one real variable.

    Returns:
        f(decode(pattern)).
    """
    return float(f(decode(as_index(pattern), space)))
