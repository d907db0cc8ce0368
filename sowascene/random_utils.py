"""Pseudo-random helpers with C-style ``rand`` semantics."""

from __future__ import annotations

import random
import time

RAND_MAX = 2147483647

_generator = random.Random()


def randomize(seed: int | None = None) -> None:
    """Reseed the generator, from the current time in seconds unless *seed* is given."""
    _generator.seed(int(time.time()) if seed is None else seed)


def rand() -> int:
    """Return a pseudo-random integer in ``[0, RAND_MAX]``."""
    return _generator.randint(0, RAND_MAX)


def rand_range(min_value: int, max_value: int) -> int:
    """Return an integer in ``[min, max)``; the bounds are swapped if reversed.

    Equal bounds yield that bound.
    """
    if min_value == max_value:
        return max_value
    if max_value < min_value:
        min_value, max_value = max_value, min_value
    return min_value + rand() % (max_value - min_value)


def rand_float() -> float:
    """Return a float in ``[0.0, 1.0]``."""
    return rand() / RAND_MAX


def rand_range_float(min_value: float, max_value: float) -> float:
    """Return a float between the bounds; the bounds are swapped if reversed."""
    if max_value < min_value:
        min_value, max_value = max_value, min_value
    return min_value + rand_float() * (max_value - min_value)