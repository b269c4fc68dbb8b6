"""Uniform random integers for the battle game."""

from __future__ import annotations

import random
import time


class URandom:
    """A source of uniformly distributed non-negative integers."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random()
        self.reseed(seed)

    def reseed(self, seed: int | None = None) -> None:
        """Reset the generator; with no seed the current time is used."""
        self._random.seed(int(time.time()) if seed is None else seed)

    def below(self, limit: int) -> int:
        """Return an integer in ``[0, limit)``; a limit of zero gives zero."""
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        if limit == 0:
            return 0
        return self._random.randrange(limit)

    def between(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]``, both ends included."""
        if high < low:
            raise ValueError(f"empty range: {low}..{high}")
        return low + self.below(high - low + 1)


_default = URandom()


def urand(low: int, high: int) -> int:
    """Draw from the shared generator, both ends included."""
    return _default.between(low, high)


def seed(value: int | None) -> None:
    """Reseed the shared generator used by :func:`urand`."""
    _default.reseed(value)