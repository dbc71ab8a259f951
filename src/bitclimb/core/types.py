"""Core types for encoded candidates, search results and errors.

This module defines the canonical types that form the interface
between the solution-space encoding and the search.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType

# Raw bit vector of an encoded candidate (width <= 31 bits).
BitPattern = NewType("BitPattern", int)

# Ordinal position in the space, numerically identical to a BitPattern.
Index = NewType("Index", int)


class OptimizationGoal(str, Enum):
    """Direction of the search."""

    MAX = "max"
    MIN = "min"


class SpaceConfigError(ValueError):
    """Raised when solution-space parameters violate a construction rule.

    Attributes:
        rule: Machine-readable name of the violated rule, one of
            ``invalid_range``, ``invalid_step``, ``bit_length_out_of_range``,
            ``unrepresentable_range`` or ``too_many_solutions``.
    """

    def __init__(self, rule: str, message: str) -> None:
        super().__init__(message)
        self.rule = rule


class NonComparableScoreError(ArithmeticError):
    """Raised when a neighbor score cannot be ordered (NaN)."""

    def __init__(self, pattern: int, x: float) -> None:
        super().__init__(f"NaN score for pattern {pattern} (x={x!r}) while comparing neighbors")
        self.pattern = pattern
        self.x = x


@dataclass
class ClimbResult:
    """Result from a hill-climbing run.

    Attributes:
        x: Decoded real value of the final pattern.
        pattern: Final bit pattern.
        score: Objective value at ``x``.
        initial_pattern: Pattern drawn before the first round.
        n_accepted: Number of accepted improving moves over all rounds.
        history: Per-round list of current-pattern scores visited by the
            inner loop.
    """

    x: float
    pattern: BitPattern
    score: float
    initial_pattern: BitPattern
    n_accepted: int = 0
    history: list[list[float]] = field(default_factory=list)

    @property
    def rounds(self) -> int:
        """Number of rounds that were run."""
        return len(self.history)
