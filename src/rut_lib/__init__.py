"""Parse, validate, format and generate Chilean RUTs.

Uso rápido::

    >>> import rut_lib
    >>> rut = rut_lib.parse("17.951.585-7")
    >>> rut.number, rut.dv
    (17951585, '7')
    >>> rut.render(rut_lib.Format.DOTS)
    '17.951.585-7'
    >>> str(rut_lib.from_number(24136773))
    '24136773-8'
"""

from __future__ import annotations

from rut_lib.core.domain.checksum import compute_check_digit
from rut_lib.core.domain.errors import (
    InvalidDVError,
    InvalidFormatError,
    OutOfRangeError,
    RutError,
)
from rut_lib.core.domain.models import Format, Rut
from rut_lib.core.domain.range import MAX, MIN
from rut_lib.core.interfaces.random_source import RandomSource

__version__ = "0.1.2"


def parse(text: str) -> Rut:
    """Parse `text` into a verified `Rut` (raises a `RutError` subclass)."""

    return Rut.from_text(text)


def from_number(number: int) -> Rut:
    return Rut.from_number(number)


def randomize(source: RandomSource | None = None) -> Rut:
    return Rut.randomize(source)


def is_valid(text: str) -> bool:
    try:
        Rut.from_text(text)
    except RutError:
        return False
    return True


__all__ = [
    "MAX",
    "MIN",
    "Format",
    "InvalidDVError",
    "InvalidFormatError",
    "OutOfRangeError",
    "RandomSource",
    "Rut",
    "RutError",
    "compute_check_digit",
    "from_number",
    "is_valid",
    "parse",
    "randomize",
]
