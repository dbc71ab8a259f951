"""Bit-flip hill climbing.

Flow:
    1. random_pattern(space, rng) -> initial pattern
    2. for each of t rounds:
         repeat: score the l single-bit-flip neighbors, keep the first best,
                 move there if it strictly beats the current score
         until no neighbor improves (local optimum)
    3. decode the final pattern -> ClimbResult

Nothing perturbs the pattern between rounds, so once the first round has
reached a local optimum the remaining rounds leave it unchanged.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ..core.encoding import as_index, decode, decode_array, neighbors, random_pattern
from ..core.objective import Objective, objective
from ..core.space import SolutionSpace
from ..core.types import BitPattern, ClimbResult, NonComparableScoreError, OptimizationGoal

logger = logging.getLogger(__name__)


def best_neighbor(
    pattern: BitPattern,
    space: SolutionSpace,
    f: Objective = objective,
    sign: float = 1.0,
) -> tuple[BitPattern, float]:
    """Select the best single-bit-flip neighbor of a pattern.

    Neighbors are scanned from bit 0 upwards and the best is only replaced
    on a strictly greater score, so the lowest flipped bit wins ties.

    Args:
        pattern: Current pattern.
        space: Solution space.
        f: Objective of one real variable.
        sign: 1.0 to maximize f, -1.0 to minimize it.

    Returns:
        (neighbor, signed score) of the selected neighbor.

    Raises:
        NonComparableScoreError: If any neighbor scores NaN.
    """
    candidates = neighbors(pattern, space)
    xs = decode_array(candidates, space)

    def signed_score(p: np.int64, x: np.float64) -> float:
        score = sign * float(f(float(x)))
        if math.isnan(score):
            raise NonComparableScoreError(int(p), float(x))
        return score

    best = BitPattern(int(candidates[0]))
    best_score = signed_score(candidates[0], xs[0])
    for p, x in zip(candidates[1:], xs[1:]):
        score = signed_score(p, x)
        if score > best_score:
            best = BitPattern(int(p))
            best_score = score

    return best, best_score


def hill_climb(
    space: SolutionSpace,
    t: int,
    rng: np.random.Generator | None = None,
    *,
    f: Objective = objective,
    goal: OptimizationGoal | str = OptimizationGoal.MAX,
) -> ClimbResult:
    """Run bit-flip hill climbing over a solution space.

    Args:
        space: Solution space defining the encoding.
        t: Number of rounds (>= 0). With t == 0 the initial pattern is
            returned unchanged.
        rng: Random number generator for the initial pattern (uses default
            if None).
        f: Objective of one real variable.
        goal: "max" or "min".

    Returns:
        ClimbResult with the decoded value, final pattern, raw score and
        per-round score history.

    Raises:
        ValueError: If t is negative.
        NonComparableScoreError: If a neighbor scores NaN.
    """
    if t < 0:
        raise ValueError(f"rounds must be >= 0, got {t}")
    goal = OptimizationGoal(goal)
    sign = 1.0 if goal is OptimizationGoal.MAX else -1.0

    if rng is None:
        rng = np.random.default_rng()

    vc = random_pattern(space, rng)
    initial = vc
    score = float(f(decode(as_index(vc), space)))
    logger.debug("Initial pattern %d (l=%d), f=%g", vc, space.precision.l, score)

    history: list[list[float]] = []
    n_accepted = 0
    for round_idx in range(t):
        trace = [score]
        while True:
            candidate, candidate_score = best_neighbor(vc, space, f, sign)
            if candidate_score > sign * score:
                vc = candidate
                score = sign * candidate_score
                trace.append(score)
                n_accepted += 1
            else:
                break
        history.append(trace)
        logger.debug(
            "Round %d/%d: pattern %d, f=%g, %d moves", round_idx + 1, t, vc, score, len(trace) - 1
        )

    x = decode(as_index(vc), space)
    logger.info("Hill climb finished: x=%g, f=%g after %d accepted moves", x, score, n_accepted)
    return ClimbResult(
        x=x,
        pattern=vc,
        score=score,
        initial_pattern=initial,
        n_accepted=n_accepted,
        history=history,
    )
