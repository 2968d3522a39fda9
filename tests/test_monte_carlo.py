import math
import random

import pytest

from algolab.experiments.area import EXACT_AREA
from algolab.geometry import narrow_rectangle, relative_error
from algolab.models import Rectangle
from algolab.monte_carlo import estimate_area

WIDE = Rectangle(0.0, 3.0, 0.0, 3.0)


def test_exact_area_closed_form() -> None:
    assert EXACT_AREA == 0.25 * math.pi + 1.25 * math.asin(0.8) - 1.0
    assert EXACT_AREA == pytest.approx(0.9445172, abs=1e-6)


def test_narrow_estimate_converges(circles) -> None:
    rect = narrow_rectangle(circles)
    est = estimate_area(*circles, rect, 100000, random.Random(42))
    assert relative_error(est, EXACT_AREA) < 0.02


def test_wide_estimate_converges(circles) -> None:
    est = estimate_area(*circles, WIDE, 100000, random.Random(42))
    assert relative_error(est, EXACT_AREA) < 0.05


def test_estimate_is_deterministic_for_seed(circles) -> None:
    a = estimate_area(*circles, WIDE, 2000, random.Random(42))
    b = estimate_area(*circles, WIDE, 2000, random.Random(42))
    assert a == b


def test_estimate_consumes_two_draws_per_sample(circles) -> None:
    rng = random.Random(3)
    estimate_area(*circles, WIDE, 50, rng)
    ref = random.Random(3)
    for _ in range(100):
        ref.random()
    assert rng.random() == ref.random()


def test_estimate_bounded_by_rectangle_area(circles) -> None:
    est = estimate_area(*circles, WIDE, 500, random.Random(1))
    assert 0.0 <= est <= WIDE.area


@pytest.mark.parametrize("num_samples", [0, -5])
def test_non_positive_samples_rejected(circles, num_samples: int) -> None:
    with pytest.raises(ValueError):
        estimate_area(*circles, WIDE, num_samples, random.Random(42))


def test_zero_area_rectangle_yields_zero(circles) -> None:
    flat = Rectangle(1.4, 1.4, 1.0, 2.0)
    assert estimate_area(*circles, flat, 1000, random.Random(42)) == 0.0
