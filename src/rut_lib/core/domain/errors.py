"""Errors surfaced by the RUT domain.

Three failure kinds, mutually exclusive:
- `InvalidFormatError`: the text does not have the shape of a RUT.
- `InvalidDVError`: the text parsed, but its check character is wrong.
- `OutOfRangeError`: the number falls outside the accepted interval.

All of them derive from `RutError` (a `ValueError`) so callers can handle the
whole family with a single `except`.
"""

from __future__ import annotations

from rut_lib.core.domain.range import MAX, MIN, group_thousands


class RutError(ValueError):
    """Base class for every RUT validation failure."""


class InvalidFormatError(RutError):
    def __init__(self, value: object = None) -> None:
        self.value = value
        super().__init__("The input format is invalid")


class InvalidDVError(RutError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid DV, must be {expected}, instead {actual}.")


class OutOfRangeError(RutError):
    def __init__(self, number: int | None = None) -> None:
        self.number = number
        super().__init__(
            f"The input number must be between {group_thousands(MIN)} to {group_thousands(MAX)}"
        )
