from __future__ import annotations

import csv
import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Tuple

from algolab.models import AreaRow, SortRow

logger = logging.getLogger("algolab.aggregate")

SummaryKey = Tuple[str, str, int]  # (type, algo, threshold)


def read_area_results(path: str | Path) -> List[AreaRow]:
    rows: List[AreaRow] = []
    with open(path, "r", newline="", encoding="utf-8") as f:
        for r in csv.DictReader(f):
            rows.append(
                AreaRow(
                    N=int(r["N"]),
                    area_wide=float(r["area_wide"]),
                    relerr_wide=float(r["relerr_wide"]),
                    area_narrow=float(r["area_narrow"]),
                    relerr_narrow=float(r["relerr_narrow"]),
                )
            )
    return rows


def read_sort_results(path: str | Path) -> List[SortRow]:
    rows: List[SortRow] = []
    with open(path, "r", newline="", encoding="utf-8") as f:
        for r in csv.DictReader(f):
            rows.append(
                SortRow(
                    type=r["type"],
                    n=int(r["n"]),
                    algo=r["algo"],
                    threshold=int(r["threshold"]),
                    time=float(r["time"]),
                )
            )
    return rows


def summarize_sort_results(rows: List[SortRow]) -> Dict[SummaryKey, Tuple[float, int]]:
    """Mean time across sizes for each (type, algo, threshold).

    Returns:
        Mapping ``key -> (mean_time, number_of_sizes)`` in first-seen order.
    """
    totals: Dict[SummaryKey, float] = defaultdict(float)
    counts: Dict[SummaryKey, int] = defaultdict(int)
    for r in rows:
        key = (r.type, r.algo, r.threshold)
        totals[key] += r.time
        counts[key] += 1
    return {key: (totals[key] / counts[key], counts[key]) for key in totals}


def best_thresholds(
    summary: Dict[SummaryKey, Tuple[float, int]],
) -> Dict[str, Tuple[int, float, float | None]]:
    """Pick the fastest hybrid threshold per input type.

    Returns:
        ``type -> (threshold, hybrid_mean, standard_mean)``; ``standard_mean``
        is None when the standard variant was not measured. Ties keep the
        smaller threshold.
    """
    best: Dict[str, Tuple[int, float]] = {}
    standard: Dict[str, float] = {}
    for (input_type, algo, thr), (mean, _) in summary.items():
        if algo == "standard":
            standard[input_type] = mean
            continue
        current = best.get(input_type)
        if current is None or mean < current[1] or (mean == current[1] and thr < current[0]):
            best[input_type] = (thr, mean)
    return {t: (thr, mean, standard.get(t)) for t, (thr, mean) in best.items()}


def write_sort_summary(rows: List[SortRow], out_path: str | Path) -> Path:
    out_path = Path(out_path)
    summary = summarize_sort_results(rows)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["type", "algo", "threshold", "mean_time", "sizes"])
        for (input_type, algo, thr), (mean, count) in summary.items():
            writer.writerow([input_type, algo, thr, mean, count])
    for input_type, (thr, mean, std_mean) in best_thresholds(summary).items():
        logger.info(
            "Best threshold for %s: %d (mean %.1f us, standard %s us)",
            input_type,
            thr,
            mean,
            f"{std_mean:.1f}" if std_mean is not None else "n/a",
        )
    logger.info("Summary written: %s", out_path)
    return out_path
