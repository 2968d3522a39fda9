"""Experiment settings loaded from a YAML file.

Every key is optional. Missing keys fall back to the fixed parameters of the
reference experiments, so an absent or empty file reproduces the full sweep.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

import yaml

from algolab.geometry import narrow_rectangle
from algolab.models import Circle, Rectangle

DEFAULT_CIRCLES = (
    Circle(1.0, 1.0, 1.0),
    Circle(1.5, 2.0, math.sqrt(5.0) / 2.0),
    Circle(2.0, 1.5, math.sqrt(5.0) / 2.0),
)
DEFAULT_WIDE = Rectangle(0.0, 3.0, 0.0, 3.0)

# Quarter disc of c1 plus two circular segments of the sqrt(5)/2 circles
# over unit chords. Valid only for DEFAULT_CIRCLES.
EXACT_AREA = 0.25 * math.pi + 1.25 * math.asin(0.8) - 1.0


@dataclass(frozen=True)
class AreaSettings:
    """Sample-count sweep of the three-circle area experiment.

    ``exact`` is the reference intersection area. It may be omitted only for
    the default circles, whose closed form is :data:`EXACT_AREA`.
    """

    n_start: int = 100
    n_stop: int = 100000
    n_step: int = 500
    seed: int = 42
    circles: Tuple[Circle, Circle, Circle] = DEFAULT_CIRCLES
    wide: Rectangle = DEFAULT_WIDE
    exact: Optional[float] = None

    def __post_init__(self) -> None:
        if self.n_start <= 0:
            raise ValueError("monte_carlo.n_start must be > 0")
        if self.n_step <= 0:
            raise ValueError("monte_carlo.n_step must be > 0")
        if self.n_start > self.n_stop:
            raise ValueError("monte_carlo.n_start must be <= n_stop")
        if len(self.circles) != 3:
            raise ValueError("monte_carlo.circles must list exactly three circles")
        if self.exact is None:
            if tuple(self.circles) != DEFAULT_CIRCLES:
                raise ValueError("monte_carlo.exact is required for non-default circles")
        elif not (math.isfinite(self.exact) and self.exact > 0):
            raise ValueError(f"monte_carlo.exact must be > 0, got {self.exact}")
        narrow = narrow_rectangle(self.circles)
        if not (
            self.wide.contains(narrow.min_x, narrow.min_y)
            and self.wide.contains(narrow.max_x, narrow.max_y)
        ):
            raise ValueError(
                "monte_carlo.wide must contain the circles' bounding box intersection"
            )

    @property
    def exact_area(self) -> float:
        return EXACT_AREA if self.exact is None else self.exact


@dataclass(frozen=True)
class SortSettings:
    """Input type x size x variant sweep of the sorting benchmark."""

    max_size: int = 100000
    min_size: int = 500
    step: int = 100
    runs: int = 5
    max_value: int = 6000
    seed: int = 42
    thresholds: Tuple[int, ...] = (5, 10, 15, 20, 30, 50)
    types: Tuple[str, ...] = ("random", "reversed", "almost")

    def __post_init__(self) -> None:
        if self.min_size < 0 or self.min_size > self.max_size:
            raise ValueError("sort_benchmark requires 0 <= min_size <= max_size")
        if self.step <= 0:
            raise ValueError("sort_benchmark.step must be > 0")
        if self.runs < 1:
            raise ValueError("sort_benchmark.runs must be >= 1")
        if any(t < 0 for t in self.thresholds):
            raise ValueError("sort_benchmark.thresholds must be >= 0")
        unknown = set(self.types) - {"random", "reversed", "almost"}
        if unknown:
            raise ValueError(f"Unknown input types: {sorted(unknown)}")


@dataclass(frozen=True)
class Settings:
    monte_carlo: AreaSettings = field(default_factory=AreaSettings)
    sort_benchmark: SortSettings = field(default_factory=SortSettings)
    output_dir: str = "results"
    log_level: str = "INFO"


def _section(name: str, raw: Any) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{name} must be a mapping, got {type(raw).__name__}")
    return raw


def _check_keys(section: str, raw: Dict[str, Any], allowed: set[str]) -> None:
    unknown = set(raw) - allowed
    if unknown:
        raise ValueError(f"Unknown keys in {section}: {sorted(unknown)}")


def _number(section: str, key: str, value: Any, kind=int):
    # bool is an int subclass; yaml 'yes'/'no' should not pass as a number
    if isinstance(value, bool):
        raise ValueError(f"{section}.{key} must be a number, got {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{section}.{key} must be a number, got {value!r}") from e


def _list(section: str, key: str, value: Any) -> list:
    if not isinstance(value, list):
        raise ValueError(f"{section}.{key} must be a list, got {type(value).__name__}")
    return value


def _floats(section: str, raw: Any, keys: Tuple[str, ...]) -> list:
    entry = _section(section, raw)
    missing = [k for k in keys if k not in entry]
    if missing:
        raise ValueError(f"{section} is missing keys: {missing}")
    _check_keys(section, entry, set(keys))
    return [_number(section, k, entry[k], float) for k in keys]


def _area_settings(raw: Dict[str, Any]) -> AreaSettings:
    _check_keys("monte_carlo", raw, {f.name for f in fields(AreaSettings)})
    kwargs: Dict[str, Any] = {}
    for key in ("n_start", "n_stop", "n_step", "seed"):
        if key in raw:
            kwargs[key] = _number("monte_carlo", key, raw[key])
    if raw.get("exact") is not None:
        kwargs["exact"] = _number("monte_carlo", "exact", raw["exact"], float)
    if "circles" in raw:
        kwargs["circles"] = tuple(
            Circle(*_floats(f"monte_carlo.circles[{i}]", c, ("x", "y", "r")))
            for i, c in enumerate(_list("monte_carlo", "circles", raw["circles"]))
        )
    if "wide" in raw:
        kwargs["wide"] = Rectangle(
            *_floats("monte_carlo.wide", raw["wide"], ("min_x", "max_x", "min_y", "max_y"))
        )
    return AreaSettings(**kwargs)


def _sort_settings(raw: Dict[str, Any]) -> SortSettings:
    _check_keys("sort_benchmark", raw, {f.name for f in fields(SortSettings)})
    kwargs: Dict[str, Any] = {}
    for key in ("max_size", "min_size", "step", "runs", "max_value", "seed"):
        if key in raw:
            kwargs[key] = _number("sort_benchmark", key, raw[key])
    if "thresholds" in raw:
        kwargs["thresholds"] = tuple(
            _number("sort_benchmark", "thresholds", t)
            for t in _list("sort_benchmark", "thresholds", raw["thresholds"])
        )
    if "types" in raw:
        kwargs["types"] = tuple(
            str(t) for t in _list("sort_benchmark", "types", raw["types"])
        )
    return SortSettings(**kwargs)


def parse_config(cfg: Dict[str, Any] | None) -> Settings:
    """Build :class:`Settings` from an already parsed mapping.

    Raises:
        ValueError: For any malformed section, key or value.
    """
    cfg = _section("config", cfg)
    _check_keys("config", cfg, {f.name for f in fields(Settings)})
    return Settings(
        monte_carlo=_area_settings(_section("monte_carlo", cfg.get("monte_carlo"))),
        sort_benchmark=_sort_settings(_section("sort_benchmark", cfg.get("sort_benchmark"))),
        output_dir=str(cfg.get("output_dir", "results")),
        log_level=str(cfg.get("log_level", "INFO")),
    )


def load_config(config_file: str = "config.yaml") -> Settings:
    """Load settings from YAML; a missing file yields the defaults."""
    if not os.path.isfile(config_file):
        return Settings()
    with open(config_file, "r", encoding="utf-8") as file:
        cfg = yaml.safe_load(file)
    return parse_config(cfg)
