"""Numeric bounds accepted for a RUT body and random sampling within them.

The accepted interval is half-open: `MIN <= number < MAX`. `MAX` is excluded
both from validation and from sampling.
"""

from __future__ import annotations

import random

from rut_lib.core.interfaces.random_source import RandomSource

MIN = 1_000_000
MAX = 99_999_999


def is_in_range(number: int) -> bool:
    return MIN <= number < MAX


def group_thousands(number: int) -> str:
    """Group digits in thousands with a dot (`17951585` -> `17.951.585`)."""

    return f"{number:,}".replace(",", ".")


def default_random_source() -> RandomSource:
    return random.SystemRandom()


def random_number(source: RandomSource | None = None) -> int:
    """Draw a number uniformly from `[MIN, MAX)`."""

    if source is None:
        source = default_random_source()
    return source.randrange(MIN, MAX)
