"""Standard vs hybrid merge sort timing benchmark.

Sweeps input type x prefix size x algorithm variant (standard merge sort
followed by the hybrid at each insertion sort threshold) and records the
mean sort duration of every combination.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import List

from algolab.config import SortSettings
from algolab.experiments.runner import CsvResultsSink, ExperimentRunner
from algolab.generator import ArrayGenerator
from algolab.models import SortRow
from algolab.sorting import hybrid_merge_sort, merge_sort
from algolab.timing import time_average

logger = logging.getLogger("algolab.sort_benchmark")

RESULTS_FILE = "results.csv"


@dataclass(frozen=True)
class SortRun:
    input_type: str  # 'random' | 'reversed' | 'almost'
    n: int
    algorithm: str  # 'standard' | 'hybrid'
    threshold: int  # 0 for 'standard'


def generate_sort_plan(settings: SortSettings) -> List[SortRun]:
    """Nested order: input type, then size, then standard and each threshold."""
    configs: List[SortRun] = []
    for input_type in settings.types:
        for n in range(settings.min_size, settings.max_size + 1, settings.step):
            configs.append(SortRun(input_type, n, "standard", 0))
            for thr in settings.thresholds:
                configs.append(SortRun(input_type, n, "hybrid", thr))
    return configs


def _sort_standard(a: list, n: int) -> None:
    merge_sort(a, 0, n - 1)


def _sort_hybrid(a: list, n: int, threshold: int) -> None:
    hybrid_merge_sort(a, 0, n - 1, threshold)


class SortBenchmark:
    """Times one :class:`SortRun` on a prefix of the shared base arrays."""

    def __init__(self, settings: SortSettings, generator: ArrayGenerator | None = None):
        self.settings = settings
        if generator is None:
            generator = ArrayGenerator(settings.max_size, settings.max_value, settings.seed)
        elif generator.max_size < settings.max_size:
            raise ValueError(
                f"generator max_size {generator.max_size} < sweep max_size {settings.max_size}"
            )
        self.generator = generator

    def __call__(self, run: SortRun) -> SortRow:
        data = self.generator.get(run.input_type, run.n)
        if run.algorithm == "standard":
            op = partial(_sort_standard, n=run.n)
        elif run.algorithm == "hybrid":
            op = partial(_sort_hybrid, n=run.n, threshold=run.threshold)
        else:
            raise ValueError(f"Unknown algorithm {run.algorithm}")
        seconds = time_average(data, op, self.settings.runs)
        return SortRow(
            type=run.input_type,
            n=run.n,
            algo=run.algorithm,
            threshold=run.threshold,
            time=seconds * 1e6,
        )


def run_sort_benchmark(settings: SortSettings, out_dir: str | Path) -> List[SortRow]:
    """Run the full sweep and write ``results.csv`` to ``out_dir``."""
    benchmark = SortBenchmark(settings)
    plan = generate_sort_plan(settings)
    per_type = len(plan) // max(1, len(settings.types))
    path = Path(out_dir) / RESULTS_FILE
    with CsvResultsSink(path, SortRow.FIELDS) as sink:
        rows = ExperimentRunner(
            benchmark,
            sink,
            name="sort",
            log_every=max(1, per_type // 10),
        ).run(plan)
    logger.info("Saved %s", path)
    return rows
