"""Random number helpers."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class RandomDevice:
    """A random source with inclusive integer and float ranges."""

    def __init__(self, seed: int | None = None) -> None:
        self._gen = random.Random(seed)

    def random_int(self, start: int, end: int) -> int:
        """Return an integer in ``[start, end]``."""
        return self._gen.randint(start, end)

    def random_float(self, start: float, end: float) -> float:
        """Return a float between ``start`` and ``end``."""
        return self._gen.uniform(start, end)

    def random_index(self, items: Sequence) -> int:
        """Return a valid index into ``items``; raises ValueError if empty."""
        if not items:
            raise ValueError("cannot pick an index from an empty sequence")
        return self.random_int(0, len(items) - 1)

    def random_item(self, items: Sequence[T]) -> T:
        """Return a randomly chosen element of ``items``."""
        return items[self.random_index(items)]

    def shuffle(self, source: Sequence, values: Sequence[T]) -> list[T]:
        """Return one random pick from ``values`` for each element of ``source``."""
        return [self.random_item(values) for _ in source]