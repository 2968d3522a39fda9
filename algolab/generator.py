"""Seeded base arrays for the sorting benchmark.

Three base sequences of length ``max_size`` are built once; every benchmark
size then uses a prefix of the same base sequence so that all algorithm
variants at a given size sort identical input.
"""

from __future__ import annotations

import random
from typing import List

INPUT_TYPES = ("random", "reversed", "almost")


class ArrayGenerator:
    """Holds the ``random``, ``reversed`` and ``almost`` sorted base arrays.

    Draw order is part of the contract: ``max_size`` value draws for the
    random array first, then ``max_size // 100`` pairs of index draws for the
    almost sorted perturbation, all from one ``random.Random(seed)``.
    """

    def __init__(self, max_size: int, max_value: int, seed: int = 42):
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")
        if max_value < 0:
            raise ValueError(f"max_value must be >= 0, got {max_value}")
        self.max_size = max_size
        self.max_value = max_value
        self.seed = seed

        rng = random.Random(seed)
        self._random = [rng.randint(0, max_value) for _ in range(max_size)]
        self._reversed = sorted(self._random, reverse=True)

        self._almost = sorted(self._random)
        swaps = max_size // 100
        for _ in range(swaps):
            i = rng.getrandbits(32) % max_size
            j = rng.getrandbits(32) % max_size
            self._almost[i], self._almost[j] = self._almost[j], self._almost[i]

    def _prefix(self, base: List[int], n: int) -> List[int]:
        if n < 0 or n > self.max_size:
            raise IndexError(f"prefix length {n} out of range [0, {self.max_size}]")
        return base[:n]

    def get_random(self, n: int) -> List[int]:
        return self._prefix(self._random, n)

    def get_reversed(self, n: int) -> List[int]:
        """First ``n`` elements of the descending base array.

        This is a prefix of the full sorted sequence, not ``get_random(n)``
        sorted on its own (the two agree only for ``n == max_size``).
        """
        return self._prefix(self._reversed, n)

    def get_almost_sorted(self, n: int) -> List[int]:
        return self._prefix(self._almost, n)

    def get(self, input_type: str, n: int) -> List[int]:
        """Dispatch on an input type label from ``INPUT_TYPES``."""
        if input_type == "random":
            return self.get_random(n)
        if input_type == "reversed":
            return self.get_reversed(n)
        if input_type == "almost":
            return self.get_almost_sorted(n)
        raise ValueError(f"Unknown input type: {input_type}")
