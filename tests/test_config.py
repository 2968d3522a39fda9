from __future__ import annotations

from pathlib import Path

import pytest

from algolab.config import (
    DEFAULT_CIRCLES,
    EXACT_AREA,
    AreaSettings,
    Settings,
    SortSettings,
    load_config,
    parse_config,
)
from algolab.models import Circle, Rectangle


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "nope.yaml")) == Settings()


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("")
    assert load_config(str(cfg)) == Settings()


def test_shipped_config_matches_defaults(project_root: Path) -> None:
    assert load_config(str(project_root / "config.yaml")) == Settings()


def test_defaults_match_reference_sweep() -> None:
    s = Settings()
    assert (s.monte_carlo.n_start, s.monte_carlo.n_stop, s.monte_carlo.n_step) == (
        100,
        100000,
        500,
    )
    assert s.monte_carlo.circles == DEFAULT_CIRCLES
    b = s.sort_benchmark
    assert (b.max_size, b.min_size, b.step, b.runs, b.max_value) == (100000, 500, 100, 5, 6000)
    assert b.thresholds == (5, 10, 15, 20, 30, 50)
    assert b.types == ("random", "reversed", "almost")


def test_overrides(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(
        "log_level: debug\n"
        "output_dir: out\n"
        "monte_carlo:\n"
        "  n_start: 10\n"
        "  n_stop: 50\n"
        "  n_step: 20\n"
        "  exact: 0.5\n"
        "  circles:\n"
        "    - {x: 0, y: 0, r: 1}\n"
        "    - {x: 1, y: 0, r: 1}\n"
        "    - {x: 0, y: 1, r: 1}\n"
        "sort_benchmark:\n"
        "  max_size: 30\n"
        "  min_size: 10\n"
        "  thresholds: [3]\n"
        "  types: [reversed]\n"
    )
    s = load_config(str(cfg))
    assert s.log_level == "debug"
    assert s.output_dir == "out"
    assert s.monte_carlo.n_step == 20
    assert s.monte_carlo.seed == 42
    assert s.monte_carlo.circles[1] == Circle(1.0, 0.0, 1.0)
    assert s.monte_carlo.exact_area == 0.5
    assert s.sort_benchmark.thresholds == (3,)
    assert s.sort_benchmark.types == ("reversed",)
    assert s.sort_benchmark.runs == 5


@pytest.mark.parametrize(
    "cfg",
    [
        {"unknown": 1},
        {"monte_carlo": {"n_steps": 5}},
        {"monte_carlo": {"n_step": 0}},
        {"monte_carlo": {"n_start": 0}},
        {"monte_carlo": {"n_start": 10, "n_stop": 5}},
        {"sort_benchmark": {"min_size": 10, "max_size": 5}},
        {"sort_benchmark": {"runs": 0}},
        {"sort_benchmark": {"step": -1}},
        {"sort_benchmark": {"types": ["shuffled"]}},
        {"sort_benchmark": {"thresholds": [-1]}},
        {"monte_carlo": 5},
        {"sort_benchmark": [1, 2]},
        {"monte_carlo": {"circles": [{"x": 0, "y": 0}] * 3}},
        {"monte_carlo": {"circles": [{"x": 0, "y": 0, "r": 1, "z": 2}] * 3, "exact": 1.0}},
        {"monte_carlo": {"circles": 3}},
        {"monte_carlo": {"wide": [0, 3, 0, 3]}},
        {"monte_carlo": {"n_start": None}},
        {"monte_carlo": {"seed": "abc"}},
        {"sort_benchmark": {"thresholds": 7}},
        {"sort_benchmark": {"thresholds": ["x"]}},
        {"sort_benchmark": {"types": "random"}},
        {"sort_benchmark": {"runs": True}},
        [1, 2, 3],
    ],
)
def test_invalid_config(cfg) -> None:
    with pytest.raises(ValueError):
        parse_config(cfg)


def test_settings_validate_directly() -> None:
    with pytest.raises(ValueError):
        AreaSettings(circles=DEFAULT_CIRCLES[:2])
    with pytest.raises(ValueError):
        SortSettings(step=0)


UNIT_AT_ORIGIN = [{"x": 0, "y": 0, "r": 1}] * 3


def test_non_default_circles_require_exact_area() -> None:
    with pytest.raises(ValueError):
        parse_config({"monte_carlo": {"circles": UNIT_AT_ORIGIN}})
    with pytest.raises(ValueError):
        AreaSettings(circles=(Circle(0.0, 0.0, 1.0),) * 3, wide=Rectangle(-2, 2, -2, 2))


def test_non_default_circles_with_exact_area() -> None:
    s = parse_config(
        {
            "monte_carlo": {
                "circles": UNIT_AT_ORIGIN,
                "wide": {"min_x": -2, "max_x": 2, "min_y": -2, "max_y": 2},
                "exact": 3.14159,
            }
        }
    )
    assert s.monte_carlo.exact_area == 3.14159


def test_wide_rectangle_must_cover_circles() -> None:
    # [0, 3] x [0, 3] misses most of the unit circles around the origin
    with pytest.raises(ValueError):
        parse_config({"monte_carlo": {"circles": UNIT_AT_ORIGIN, "exact": 3.14159}})
    with pytest.raises(ValueError):
        AreaSettings(wide=Rectangle(1.0, 3.0, 1.0, 3.0))


@pytest.mark.parametrize("exact", [0.0, -1.0, float("nan"), float("inf")])
def test_exact_area_must_be_positive_and_finite(exact: float) -> None:
    with pytest.raises(ValueError):
        AreaSettings(exact=exact)


def test_default_exact_area() -> None:
    assert AreaSettings().exact_area == EXACT_AREA


@pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
def test_non_finite_circle_in_config(value: str) -> None:
    circles = [{"x": 1, "y": 1, "r": value}] * 3
    with pytest.raises(ValueError):
        parse_config({"monte_carlo": {"circles": circles, "exact": 1.0}})
