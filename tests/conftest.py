"""Pytest configuration for bitclimb.

Shared spaces and seeded generators. Searches draw their initial pattern
from an injected numpy Generator, so every test seeds its own.
"""

from __future__ import annotations

import numpy as np
import pytest

from bitclimb.core.space import SolutionSpace


@pytest.fixture
def default_space() -> SolutionSpace:
    """Default run: [-4, 12] with d = 0.001."""
    return SolutionSpace.from_d(-4.0, 12.0, 0.001)


@pytest.fixture
def integer_space() -> SolutionSpace:
    """[0, 7] with 3 bits, so index i decodes exactly to float(i)."""
    return SolutionSpace.from_l(0.0, 7.0, 3)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
