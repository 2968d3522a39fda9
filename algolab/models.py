"""Core data structures shared by both experiments.

This module defines:
    Circle    -- immutable circle (center x, center y, radius).
    Rectangle -- immutable axis-aligned sampling rectangle.
    AreaRow   -- one row of the Monte Carlo convergence results.
    SortRow   -- one row of the sorting benchmark results.
"""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Circle:
    """Circle given by its center and radius.

    Attributes:
        x: Center abscissa.
        y: Center ordinate.
        r: Radius (must be >= 0).
    """

    x: float
    y: float
    r: float

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) for v in (self.x, self.y, self.r)):
            raise ValueError(f"circle values must be finite, got {self}")
        if self.r < 0:
            raise ValueError(f"radius must be >= 0, got {self.r}")


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle ``[min_x, max_x] x [min_y, max_y]``."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) for v in (self.min_x, self.max_x, self.min_y, self.max_y)):
            raise ValueError(f"rectangle bounds must be finite, got {self}")
        if self.min_x > self.max_x:
            raise ValueError(f"min_x {self.min_x} > max_x {self.max_x}")
        if self.min_y > self.max_y:
            raise ValueError(f"min_y {self.min_y} > max_y {self.max_y}")

    @property
    def area(self) -> float:
        return (self.max_x - self.min_x) * (self.max_y - self.min_y)

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


@dataclass(frozen=True)
class AreaRow:
    """Wide vs narrow rectangle estimates for a single sample count."""

    FIELDS: ClassVar[tuple[str, ...]] = (
        "N",
        "area_wide",
        "relerr_wide",
        "area_narrow",
        "relerr_narrow",
    )

    N: int
    area_wide: float
    relerr_wide: float
    area_narrow: float
    relerr_narrow: float

    def as_row(self) -> tuple:
        return astuple(self)


@dataclass(frozen=True)
class SortRow:
    """Averaged timing of one algorithm variant on one input prefix.

    Fields:
        type: Input type label (``random``, ``reversed`` or ``almost``).
        n: Prefix length.
        algo: ``standard`` or ``hybrid``.
        threshold: Insertion sort threshold (0 for ``standard``).
        time: Mean wall-clock duration in microseconds.
    """

    FIELDS: ClassVar[tuple[str, ...]] = ("type", "n", "algo", "threshold", "time")

    type: str
    n: int
    algo: str
    threshold: int
    time: float

    def as_row(self) -> tuple:
        return astuple(self)
