"""Core constants for bitclimb.

This module defines system-wide invariants such as:
- Encoding width limits
- Default run parameters
- Result format versioning
"""

from __future__ import annotations

# Encoding width
# Patterns must fit a 32-bit unsigned draw with room for 2**l - 1
MIN_BIT_LENGTH = 1
MAX_BIT_LENGTH = 31
RANDOM_DRAW_BITS = 32

# Coarsest step size accepted by SolutionSpace.from_l
MAX_STEP_FROM_L = 1.0

# Relative tolerance for the whole-mantissa check on step sizes
MANTISSA_RTOL = 1e-9

# Default run parameters
DEFAULT_A = -4.0
DEFAULT_B = 12.0
DEFAULT_D = 0.001
DEFAULT_ROUNDS = 50
DEFAULT_SEED = 42

# Result format versioning
# Bump when summary.json layout changes
RESULT_FORMAT_VERSION = "1.0"
