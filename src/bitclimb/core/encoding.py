"""Candidate encoding and decoding.

This module maps real values in a SolutionSpace to fixed-width bit patterns
and back, and provides the binary-string helpers used for display.

Layout (for a space with bit-length l):
    index 0          -> a
    index 2**l - 1   -> b
    index i          -> a + i * (b - a) / (2**l - 1)

Bit patterns and indices are the same unsigned integers. They are kept as
separate roles: bit operations (flip_bit, neighbors) take a BitPattern,
affine conversions (decode, encode) take an Index.
"""

from __future__ import annotations

import numpy as np

from .constants import RANDOM_DRAW_BITS
from .space import SolutionSpace
from .types import BitPattern, Index


def as_index(pattern: BitPattern) -> Index:
    """Reinterpret a bit pattern as an ordinal index."""
    return Index(int(pattern))


def as_pattern(index: Index) -> BitPattern:
    """Reinterpret an ordinal index as a bit pattern."""
    return BitPattern(int(index))


def decode(index: Index, space: SolutionSpace) -> float:
    """Convert an index to a real value within the space.

    Args:
        index: Ordinal position, [0, 2**l - 1].
        space: Solution space.

    Returns:
        a + index * (b - a) / (2**l - 1). Not corrected for float drift.
    """
    return space.a + int(index) * (space.b - space.a) / space.precision.max_index


def decode_array(indices: np.ndarray, space: SolutionSpace) -> np.ndarray:
    """Vectorized decode of an array of indices."""
    idx = np.asarray(indices, dtype=np.float64)
    return space.a + idx * (space.b - space.a) / space.precision.max_index


def encode(x: float, space: SolutionSpace) -> Index:
    """Convert a real value to the nearest index within the space.

    Ties are rounded half to even. Values outside [a, b] map to indices
    outside [0, 2**l - 1] and are not rejected.
    """
    if space.b == space.a:
        return Index(0)
    return Index(round((float(x) - space.a) / (space.b - space.a) * space.precision.max_index))


def flip_bit(pattern: BitPattern, n: int) -> BitPattern:
    """Flip bit n of a pattern (0 = least significant)."""
    return BitPattern(int(pattern) ^ (1 << n))


def neighbors(pattern: BitPattern, space: SolutionSpace) -> np.ndarray:
    """All single-bit-flip neighbors of a pattern, ordered by flipped bit.

    Returns:
        Array of shape (l,), element n is flip_bit(pattern, n).
    """
    bits = np.left_shift(np.int64(1), np.arange(space.precision.l, dtype=np.int64))
    return np.bitwise_xor(np.int64(pattern), bits)


def parse_binary(text: str) -> Index:
    """Parse a binary string such as '0101' into an index."""
    text = text.strip()
    if not text or any(c not in "01" for c in text):
        raise ValueError(f"Not a binary string: {text!r}")
    return Index(int(text, 2))


def format_binary(index: Index, width: int) -> str:
    """Format an index as a binary string left-zero-padded to width."""
    if index < 0:
        raise ValueError(f"Cannot format negative index {index} as binary")
    return format(int(index), f"0{width}b")


def real_to_bin(x: float, space: SolutionSpace) -> str:
    """Encode a real value and format it with the space's bit-length."""
    return format_binary(encode(x, space), space.precision.l)


def bin_to_real(text: str, space: SolutionSpace) -> float:
    """Parse a binary string and decode it within the space."""
    return decode(parse_binary(text), space)


def random_pattern(space: SolutionSpace, rng: np.random.Generator | None = None) -> BitPattern:
    """Draw a uniform random pattern of the space's bit-length.

    A full 32-bit unsigned value is drawn and masked to the low l bits.

    Args:
        space: Solution space.
        rng: Random number generator (uses default if None).

    Returns:
        Pattern in [0, 2**l - 1].
    """
    if rng is None:
        rng = np.random.default_rng()

    raw = int(rng.integers(0, 1 << RANDOM_DRAW_BITS, dtype=np.uint64))
    return BitPattern(raw & space.precision.mask)
