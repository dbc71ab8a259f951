"""bitclimb: bit-flip hill climbing over a binary-encoded real interval."""

from .core import SolutionSpace
from .search import hill_climb

__version__ = "0.1.0"

__all__ = ["SolutionSpace", "hill_climb", "__version__"]
