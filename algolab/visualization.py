import logging
import os
from collections import defaultdict
from typing import Dict, List, Tuple

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from algolab.models import AreaRow, SortRow  # noqa: E402

logger = logging.getLogger("algolab.visualization")


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def plot_area_convergence(rows: List[AreaRow], filepath: str) -> str:
    """Relative error vs sample count for the wide and narrow rectangles.

    Uses a log scale on the error axis; zero errors are clipped to the
    smallest positive value so they stay visible.
    """
    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    ns = [r.N for r in rows]
    positive = [e for r in rows for e in (r.relerr_wide, r.relerr_narrow) if e > 0]
    floor = min(positive) if positive else 1e-12
    for attr, label, color in (
        ("relerr_wide", "Wide rectangle", "#00A0FF"),
        ("relerr_narrow", "Narrow rectangle", "#FF00CC"),
    ):
        values = [max(getattr(r, attr), floor) for r in rows]
        ax.plot(ns, values, label=label, linewidth=1.5, color=color)
    ax.set_yscale("log")
    ax.set_xlabel("N (samples)", fontsize=12)
    ax.set_ylabel("Relative error", fontsize=12)
    ax.set_title("Monte Carlo convergence", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    ax.legend(frameon=False, fontsize=9)
    _ensure_dir(os.path.dirname(filepath))
    fig.savefig(filepath, dpi=180)
    plt.close(fig)
    logger.info("Convergence plot saved as: %s", filepath)
    return filepath


def plot_sort_times(rows: List[SortRow], filepath: str) -> str:
    """One panel per input type with time vs n for every algorithm variant."""
    series: Dict[str, Dict[Tuple[str, int], List[Tuple[int, float]]]] = defaultdict(
        lambda: defaultdict(list)
    )
    for r in rows:
        series[r.type][(r.algo, r.threshold)].append((r.n, r.time))
    types = list(series) or ["random"]
    fig, axes = plt.subplots(
        1, len(types), figsize=(6 * len(types), 5), constrained_layout=True, squeeze=False
    )
    cmap = plt.get_cmap("tab10")
    for ax, input_type in zip(axes[0], types):
        for idx, ((algo, thr), points) in enumerate(series[input_type].items()):
            points.sort()
            label = "standard" if algo == "standard" else f"hybrid (t={thr})"
            ax.plot(
                [p[0] for p in points],
                [p[1] for p in points],
                label=label,
                linewidth=2 if algo == "standard" else 1,
                color="black" if algo == "standard" else cmap(idx % 10),
            )
        ax.set_title(input_type, fontsize=12, fontweight="bold")
        ax.set_xlabel("n", fontsize=11)
        ax.set_ylabel("Time [us]", fontsize=11)
        ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
        if series[input_type]:
            ax.legend(frameon=False, fontsize=8)
    _ensure_dir(os.path.dirname(filepath))
    fig.savefig(filepath, dpi=180)
    plt.close(fig)
    logger.info("Sort timing plot saved as: %s", filepath)
    return filepath
