"""Generic plan execution shared by both experiment drivers.

A plan is a sequence of frozen config records. The runner calls an execute
function for each record and appends the returned row to a sink, so drivers
only supply the plan and the per-config computation.
"""

from __future__ import annotations

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Generic, List, Sequence, TypeVar

logger = logging.getLogger("algolab.runner")

C = TypeVar("C")
R = TypeVar("R")


class CsvResultsSink:
    """Row-oriented CSV file with a fixed header.

    Used as a context manager: the file is opened and the header written on
    entry, and the file is closed on exit whether or not the sweep finished.
    Floats are written via ``repr`` which is locale independent.
    """

    def __init__(self, path: str | Path, fields: Sequence[str]):
        self.path = Path(path)
        self.fields = tuple(fields)
        self._file = None
        self._writer = None

    def __enter__(self) -> "CsvResultsSink":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self.fields)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None

    def write(self, row: Any) -> None:
        if self._writer is None:
            raise RuntimeError(f"Sink {self.path} is not open")
        values = row.as_row()
        if len(values) != len(self.fields):
            raise ValueError(f"Row has {len(values)} values, header has {len(self.fields)}")
        self._writer.writerow(values)


class ListSink:
    """In-memory sink with the same ``write`` interface as :class:`CsvResultsSink`."""

    def __init__(self):
        self.rows: List[Any] = []

    def write(self, row: Any) -> None:
        self.rows.append(row)


class ExperimentRunner(Generic[C, R]):
    def __init__(
        self,
        execute: Callable[[C], R],
        sink: Any,
        name: str = "experiment",
        log_every: int = 1,
    ):
        self.execute = execute
        self.sink = sink
        self.name = name
        self.log_every = max(1, log_every)

    def run(self, configs: Sequence[C]) -> List[R]:
        results: List[R] = []
        total = len(configs)
        logger.info("[%s] %d runs planned", self.name, total)
        for idx, cfg in enumerate(configs, start=1):
            row = self.execute(cfg)
            self.sink.write(row)
            results.append(row)
            if idx % self.log_every == 0 or idx == total:
                logger.info("[%s] progress %d/%d last=%s", self.name, idx, total, cfg)
        logger.info("[%s] completed %d runs", self.name, total)
        return results


def make_batch_dir(base_results_dir: str | Path) -> Path:
    """Create and return a fresh timestamped directory under ``base_results_dir``.

    Earlier batches are left untouched.
    """
    base_dir = Path(base_results_dir)
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    batch_dir = base_dir / stamp
    suffix = 1
    while batch_dir.exists():
        batch_dir = base_dir / f"{stamp}_{suffix}"
        suffix += 1
    batch_dir.mkdir(parents=True)
    return batch_dir
