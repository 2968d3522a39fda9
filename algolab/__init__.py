"""Core package for the Monte Carlo area and merge sort experiments.

Exports base data structures and the algorithmic building blocks.
"""

from algolab.generator import ArrayGenerator  # noqa: F401
from algolab.models import Circle, Rectangle  # noqa: F401
from algolab.monte_carlo import estimate_area  # noqa: F401
from algolab.sorting import hybrid_merge_sort, insertion_sort, merge_sort  # noqa: F401

__all__ = [
    "ArrayGenerator",
    "Circle",
    "Rectangle",
    "estimate_area",
    "hybrid_merge_sort",
    "insertion_sort",
    "merge_sort",
]
