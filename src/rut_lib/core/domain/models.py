"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta e inmutabilidad (`frozen`) sin escribir
  `__eq__`/`__hash__` a mano.
- Serializa directo a JSON (`model_dump(mode="json")`) para los exportadores.

Regla central:
- Un `Rut` nunca existe con un DV que no corresponda a su número. Los
  constructores públicos (`from_text`, `from_number`, `randomize`) lo
  garantizan, y el validador del modelo lo impone incluso si alguien
  construye `Rut(number=..., dv=...)` directamente.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rut_lib.core.domain.checksum import compute_check_digit
from rut_lib.core.domain.errors import InvalidDVError, OutOfRangeError
from rut_lib.core.domain.parser import extract
from rut_lib.core.domain.range import MAX, MIN, group_thousands, is_in_range, random_number
from rut_lib.core.interfaces.random_source import RandomSource


class Format(str, Enum):
    """Textual renderings supported by `Rut.render`."""

    DOTS = "dots"
    DASH = "dash"
    NONE = "none"

    @classmethod
    def default(cls) -> "Format":
        return cls.DASH


class Rut(BaseModel):
    """RUT validado: cuerpo numérico + dígito verificador."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(
        ...,
        ge=MIN,
        lt=MAX,
        description="Cuerpo del RUT, sin separadores.",
    )
    dv: str = Field(
        ...,
        pattern=r"^[0-9K]$",
        description="Dígito verificador: '0'-'9' o 'K'.",
    )

    @model_validator(mode="after")
    def _dv_matches_number(self) -> "Rut":
        expected = compute_check_digit(self.number)
        if self.dv != expected:
            raise ValueError(f"Invalid DV, must be {expected}, instead {self.dv}.")
        return self

    @classmethod
    def from_text(cls, text: str) -> "Rut":
        """Parsea `text` y verifica su DV.

        Errores:
        - `InvalidFormatError` si el texto no tiene forma de RUT.
        - `OutOfRangeError` si el cuerpo queda fuera de `[MIN, MAX)`.
        - `InvalidDVError` si el DV declarado no coincide con el calculado.
        """

        unverified = extract(text)
        rut = cls.from_number(unverified.number)
        if unverified.dv != rut.dv:
            raise InvalidDVError(expected=rut.dv, actual=unverified.dv)
        return rut

    @classmethod
    def from_number(cls, number: int) -> "Rut":
        """Construye un `Rut` calculando su DV. Falla con `OutOfRangeError`."""

        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"number must be an int, got {type(number).__name__}")
        if not is_in_range(number):
            raise OutOfRangeError(number)
        return cls(number=number, dv=compute_check_digit(number))

    @classmethod
    def randomize(cls, source: RandomSource | None = None) -> "Rut":
        """Genera un `Rut` válido al azar (útil para datos de prueba)."""

        number = random_number(source)
        return cls(number=number, dv=compute_check_digit(number))

    def render(self, fmt: Format | str = Format.DASH) -> str:
        fmt = Format(fmt)
        if fmt is Format.DOTS:
            return f"{group_thousands(self.number)}-{self.dv}"
        if fmt is Format.NONE:
            return f"{self.number}{self.dv}"
        return f"{self.number}-{self.dv}"

    def __str__(self) -> str:
        return self.render(Format.DASH)
