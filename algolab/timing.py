"""Wall-clock timing of in-place sort operations.

Each measurement sorts a fresh copy of the input, so repeated runs see
identical data and the caller's list is never modified. Averages are plain
means: no warm-up run is discarded and no outliers are trimmed.
"""

from __future__ import annotations

import time
from typing import Any, Callable, List

SortOperation = Callable[[List[Any]], None]


def time_once(data: List[Any], sort_operation: SortOperation) -> float:
    """Return the duration in seconds of ``sort_operation`` on a copy of ``data``."""
    a = list(data)
    t0 = time.perf_counter()
    sort_operation(a)
    return time.perf_counter() - t0


def time_average(data: List[Any], sort_operation: SortOperation, runs: int) -> float:
    """Mean of ``runs`` independent :func:`time_once` measurements (seconds).

    Raises:
        ValueError: If ``runs`` is not positive.
    """
    if runs <= 0:
        raise ValueError(f"runs must be > 0, got {runs}")
    total = 0.0
    for _ in range(runs):
        total += time_once(data, sort_operation)
    return total / runs
