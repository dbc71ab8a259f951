"""Solution space and precision.

A solution space is the closed interval [a, b] discretized into 2**l evenly
spaced points. The pair (l, d) is derived by one of three independent
constructors; each validates its own inputs and raises SpaceConfigError
naming the rule that failed.

    SolutionSpace.from_d(a, b, d)                  step size, whole mantissa
    SolutionSpace.from_decimal_places(a, b, p)     d = 10**-p
    SolutionSpace.from_l(a, b, l)                  d = (b - a) / (2**l - 1)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .constants import MANTISSA_RTOL, MAX_BIT_LENGTH, MAX_STEP_FROM_L, MIN_BIT_LENGTH
from .types import SpaceConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Precision:
    """Encoding precision.

    Attributes:
        l: Bit-length of the encoding, [1, 31].
        d: Step size between adjacent encoded values.
        decimal_places: Digits used when rounding real values for display.
    """

    l: int  # noqa: E741
    d: float
    decimal_places: int

    def __post_init__(self) -> None:
        if not MIN_BIT_LENGTH <= self.l <= MAX_BIT_LENGTH:
            raise SpaceConfigError(
                "bit_length_out_of_range",
                f"bit-length out of range: l={self.l} (must be in [{MIN_BIT_LENGTH}, {MAX_BIT_LENGTH}])",
            )

    @property
    def n_values(self) -> int:
        """Number of representable points (2**l)."""
        return 1 << self.l

    @property
    def max_index(self) -> int:
        """Largest valid index (2**l - 1)."""
        return (1 << self.l) - 1

    @property
    def mask(self) -> int:
        """Bit mask selecting the low l bits."""
        return (1 << self.l) - 1


def _check_range(a: float, b: float) -> None:
    if b < a:
        raise SpaceConfigError("invalid_range", f"invalid range: [{a}, {b}] (b must be >= a)")


def _bit_length_for_step(a: float, b: float, d: float) -> int:
    # a == b leaves a single point; keep at least one bit so 2**l - 1 > 0
    return max(MIN_BIT_LENGTH, math.ceil(math.log2((b - a) / d + 1)))


def _has_whole_mantissa(d: float) -> bool:
    # Dividing out the order of magnitude must leave a whole mantissa (0.002 -> 2)
    mantissa = d / 10.0 ** math.floor(math.log10(d))
    return math.isclose(mantissa, round(mantissa), rel_tol=MANTISSA_RTOL)


def _check_width(a: float, b: float, l: int, detail: str) -> None:  # noqa: E741
    if l > MAX_BIT_LENGTH:
        raise SpaceConfigError(
            "too_many_solutions",
            f"too many solutions for range [{a}, {b}] with {detail} "
            f"(needs l={l} bits, max {MAX_BIT_LENGTH})",
        )


@dataclass(frozen=True)
class SolutionSpace:
    """The interval [a, b] together with its binary precision.

    Use one of the ``from_*`` constructors; they are the only way the
    (l, d) pair is derived consistently with (a, b).
    """

    a: float
    b: float
    precision: Precision

    @property
    def l(self) -> int:  # noqa: E743
        return self.precision.l

    @property
    def d(self) -> float:
        return self.precision.d

    @property
    def width(self) -> float:
        """Interval length b - a."""
        return self.b - self.a

    @classmethod
    def from_d(cls, a: float, b: float, d: float) -> SolutionSpace:
        """Create a space from a step size.

        Args:
            a: Lower (inclusive) bound.
            b: Upper (inclusive) bound.
            d: Step size whose mantissa is a whole number (0.001, 0.002, 0.5, 10, ...).

        Returns:
            SolutionSpace with l = ceil(log2((b - a) / d + 1)).

        Raises:
            SpaceConfigError: ``invalid_range``, ``invalid_step`` or
                ``too_many_solutions``.
        """
        a, b, d = float(a), float(b), float(d)
        _check_range(a, b)
        if not (d > 0 and math.isfinite(d)) or not _has_whole_mantissa(d):
            raise SpaceConfigError(
                "invalid_step", f"step size must be a fractional power of ten, got d={d}"
            )

        l = _bit_length_for_step(a, b, d)  # noqa: E741
        _check_width(a, b, l, f"step size {d:g}")
        decimal_places = math.ceil(-math.log10(d) - MANTISSA_RTOL)
        logger.debug("Space from d=%g over [%g, %g]: l=%d", d, a, b, l)
        return cls(a, b, Precision(l=l, d=d, decimal_places=decimal_places))

    @classmethod
    def from_decimal_places(cls, a: float, b: float, decimal_places: int) -> SolutionSpace:
        """Create a space from a number of decimal places.

        The step size is 10**-decimal_places. It is not required to divide
        the range evenly; l is the minimum bit-length resolving it.

        Raises:
            SpaceConfigError: ``invalid_range`` or ``too_many_solutions``.
        """
        a, b = float(a), float(b)
        decimal_places = int(decimal_places)
        _check_range(a, b)

        d = 10.0**-decimal_places
        l = _bit_length_for_step(a, b, d)  # noqa: E741
        _check_width(a, b, l, f"{decimal_places} decimal places")
        logger.debug("Space from %d decimal places over [%g, %g]: l=%d", decimal_places, a, b, l)
        return cls(a, b, Precision(l=l, d=d, decimal_places=decimal_places))

    @classmethod
    def from_l(cls, a: float, b: float, l: int) -> SolutionSpace:  # noqa: E741
        """Create a space from a bit-length.

        For a == b the derived step is 0.0: every index decodes to a and
        encode returns 0.

        Raises:
            SpaceConfigError: ``bit_length_out_of_range``,
                ``unrepresentable_range`` or ``invalid_range``.
        """
        a, b = float(a), float(b)
        if not MIN_BIT_LENGTH <= l <= MAX_BIT_LENGTH:
            raise SpaceConfigError(
                "bit_length_out_of_range",
                f"bit-length out of range: l={l} (must be in [{MIN_BIT_LENGTH}, {MAX_BIT_LENGTH}])",
            )
        l = int(l)  # noqa: E741
        _check_range(a, b)

        d = (b - a) / ((1 << l) - 1)
        if d > MAX_STEP_FROM_L:
            raise SpaceConfigError(
                "unrepresentable_range",
                f"range [{a}, {b}] cannot be represented with l={l} bits "
                f"(step {d:g} > {MAX_STEP_FROM_L:g}); use a bigger l",
            )

        # Round the exponent up so the displayed precision is never finer than d
        decimal_places = -math.ceil(math.log10(d)) if d > 0 else 0
        logger.debug("Space from l=%d over [%g, %g]: d=%g", l, a, b, d)
        return cls(a, b, Precision(l=l, d=d, decimal_places=decimal_places))

    def round(self, x: float) -> float:
        """Round a real value to this space's decimal places."""
        return round(float(x), max(self.precision.decimal_places, 0))

    def contains(self, x: float) -> bool:
        """Check whether x lies in [a, b]."""
        return self.a <= x <= self.b
