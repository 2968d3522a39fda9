"""Containment predicates and bounding boxes for circles."""

from __future__ import annotations

from typing import Iterable

from algolab.models import Circle, Rectangle


def is_inside(x: float, y: float, circle: Circle) -> bool:
    """Return True when ``(x, y)`` lies in ``circle`` (boundary inclusive)."""
    dx = x - circle.x
    dy = y - circle.y
    return dx * dx + dy * dy <= circle.r * circle.r


def is_in_all_three(x: float, y: float, c1: Circle, c2: Circle, c3: Circle) -> bool:
    return is_inside(x, y, c1) and is_inside(x, y, c2) and is_inside(x, y, c3)


def bounding_box(circle: Circle) -> Rectangle:
    return Rectangle(
        circle.x - circle.r,
        circle.x + circle.r,
        circle.y - circle.r,
        circle.y + circle.r,
    )


def narrow_rectangle(circles: Iterable[Circle]) -> Rectangle:
    """Intersect the axis-aligned bounding boxes of ``circles``.

    The result is the tightest axis-aligned rectangle obtainable from the
    boxes alone and always contains the common intersection of the circles.

    Raises:
        ValueError: If no circles are given or the boxes do not overlap.
    """
    boxes = [bounding_box(c) for c in circles]
    if not boxes:
        raise ValueError("at least one circle is required")
    return Rectangle(
        max(b.min_x for b in boxes),
        min(b.max_x for b in boxes),
        max(b.min_y for b in boxes),
        min(b.max_y for b in boxes),
    )


def relative_error(estimate: float, exact: float) -> float:
    """Return ``|estimate - exact| / exact``.

    Raises:
        ValueError: If ``exact`` is zero.
    """
    if exact == 0:
        raise ValueError("relative error undefined for exact value 0")
    return abs(estimate - exact) / exact
