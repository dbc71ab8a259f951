"""Local search over encoded solution spaces."""

from .hill_climb import best_neighbor, hill_climb

__all__ = ["best_neighbor", "hill_climb"]
