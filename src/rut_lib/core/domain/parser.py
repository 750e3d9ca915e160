"""Reconocimiento de RUTs en texto.

Formas aceptadas (ejemplos):
- `17.951.585-7`
- `17951585-7`
- `179515857`
- `1.000.005-k` (el DV se normaliza a mayúscula)

El parser solo separa cuerpo y DV declarado; no valida rango ni checksum.
Eso lo hace `Rut.from_text`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from rut_lib.core.domain.errors import InvalidFormatError

PATTERN = re.compile(
    r"(?P<number>[0-9]{1,2}\.?[0-9]{3}\.?[0-9]{3})-?(?P<dv>[0-9kK])"
)


@dataclass(frozen=True)
class UnverifiedRut:
    """Cuerpo y DV tal como vienen en el texto, sin verificar."""

    number: int
    dv: str


def extract(text: str) -> UnverifiedRut:
    if not isinstance(text, str):
        raise InvalidFormatError(text)

    match = PATTERN.fullmatch(text)
    if match is None:
        raise InvalidFormatError(text)

    number = int(match.group("number").replace(".", ""))
    dv = match.group("dv").upper()
    return UnverifiedRut(number=number, dv=dv)
