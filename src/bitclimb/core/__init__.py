"""Core module: types, solution space, encoding, objective."""

from .encoding import (
    as_index,
    as_pattern,
    bin_to_real,
    decode,
    encode,
    flip_bit,
    format_binary,
    parse_binary,
    random_pattern,
    real_to_bin,
)
from .objective import objective, objective_bin
from .space import Precision, SolutionSpace
from .types import (
    BitPattern,
    ClimbResult,
    Index,
    NonComparableScoreError,
    OptimizationGoal,
    SpaceConfigError,
)

__all__ = [
    "BitPattern",
    "Index",
    "ClimbResult",
    "OptimizationGoal",
    "SpaceConfigError",
    "NonComparableScoreError",
    "Precision",
    "SolutionSpace",
    "as_index",
    "as_pattern",
    "decode",
    "encode",
    "flip_bit",
    "parse_binary",
    "format_binary",
    "real_to_bin",
    "bin_to_real",
    "random_pattern",
    "objective",
    "objective_bin",
]
