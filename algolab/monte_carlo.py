"""Hit-and-miss Monte Carlo estimate of the area shared by three circles."""

from __future__ import annotations

import random

from algolab.geometry import is_in_all_three
from algolab.models import Circle, Rectangle


def estimate_area(
    c1: Circle,
    c2: Circle,
    c3: Circle,
    rectangle: Rectangle,
    num_samples: int,
    rng: random.Random,
) -> float:
    """Estimate the area of ``c1 & c2 & c3`` by uniform sampling of ``rectangle``.

    For every sample the x coordinate is drawn before the y coordinate, so a
    generator seeded identically always yields the same estimate.

    Args:
        c1, c2, c3: The intersected circles.
        rectangle: Sampling domain; should contain the whole intersection.
        num_samples: Number of points to draw (must be > 0).
        rng: Generator consumed by the sampling (2 draws per sample).

    Returns:
        ``rectangle.area * inside / num_samples``.

    Raises:
        ValueError: If ``num_samples`` is not positive.
    """
    if num_samples <= 0:
        raise ValueError(f"num_samples must be > 0, got {num_samples}")
    inside = 0
    for _ in range(num_samples):
        x = rng.uniform(rectangle.min_x, rectangle.max_x)
        y = rng.uniform(rectangle.min_y, rectangle.max_y)
        if is_in_all_three(x, y, c1, c2, c3):
            inside += 1
    return rectangle.area * inside / num_samples
