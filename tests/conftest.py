"""Pytest configuration and shared fixtures.

Also ensures the project root is on sys.path so ``algolab`` and the ``main``
launcher import without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from algolab.config import DEFAULT_CIRCLES  # noqa: E402
from algolab.generator import ArrayGenerator  # noqa: E402


@pytest.fixture
def circles():
    """The three fixed circles of the area experiment."""
    return DEFAULT_CIRCLES


@pytest.fixture(scope="session")
def small_generator() -> ArrayGenerator:
    return ArrayGenerator(max_size=1000, max_value=100, seed=42)


@pytest.fixture
def project_root() -> Path:
    return _root
