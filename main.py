#!/usr/bin/env python3


import argparse
import logging
import sys
from pathlib import Path

from algolab.config import load_config
from algolab.experiments.aggregate import write_sort_summary
from algolab.experiments.area import run_area_experiment
from algolab.experiments.runner import make_batch_dir
from algolab.experiments.sort_benchmark import run_sort_benchmark
from algolab.visualization import plot_area_convergence, plot_sort_times

logger = logging.getLogger("algolab")


def _finish_area(rows, batch_dir: Path, plots: bool) -> None:
    if not plots:
        return
    try:
        plot_area_convergence(rows, str(batch_dir / "monte_carlo_convergence.png"))
    except Exception as e:
        logger.warning("Convergence plot failed: %s", e)


def _finish_sort(rows, batch_dir: Path, plots: bool) -> None:
    try:
        write_sort_summary(rows, batch_dir / "summary.csv")
    except Exception as e:
        logger.warning("Failed to write summary: %s", e)
    if not plots:
        return
    try:
        plot_sort_times(rows, str(batch_dir / "sort_times.png"))
    except Exception as e:
        logger.warning("Sort timing plot failed: %s", e)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Monte Carlo three-circle area and hybrid merge sort experiments"
    )
    parser.add_argument(
        "experiment",
        nargs="?",
        choices=("area", "sort", "all"),
        default="all",
        help="Which sweep to run (default: all)",
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to YAML config; missing file means built-in defaults",
    )
    parser.add_argument("--output-dir", default=None, help="Overrides output_dir from config")
    parser.add_argument("--no-plots", action="store_true", help="Skip figure generation")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_config(args.config)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    output_dir = args.output_dir or settings.output_dir
    # Each batch gets its own timestamped directory; old results stay in place
    batch_dir = make_batch_dir(output_dir)
    logger.info("Batch directory: %s", batch_dir)
    plots = not args.no_plots

    if args.experiment in ("area", "all"):
        rows = run_area_experiment(settings.monte_carlo, batch_dir)
        _finish_area(rows, batch_dir, plots)
    if args.experiment in ("sort", "all"):
        rows = run_sort_benchmark(settings.sort_benchmark, batch_dir)
        _finish_sort(rows, batch_dir, plots)

    logger.info("Batch completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
