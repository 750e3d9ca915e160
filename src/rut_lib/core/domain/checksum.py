"""Motor de dígito verificador (módulo 11).

Por qué aquí:
- Es la única pieza con lógica real del dominio; el resto (parser, formato)
  solo la orquesta.
- Funciones puras: sin estado, sin I/O, triviales de testear.
"""

from __future__ import annotations

WEIGHT_START = 2
WEIGHT_LIMIT = 7


def cycle_weight(index: int) -> int:
    """Peso posicional para el dígito `index` (0 = menos significativo).

    Ciclo: 2, 3, 4, 5, 6, 7, 2, 3, ...
    """

    span = WEIGHT_LIMIT - WEIGHT_START + 1
    return WEIGHT_START + index % span


def reversed_digits(number: int) -> list[int]:
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    return [int(char) for char in reversed(str(number))]


def sum_product(number: int) -> int:
    return sum(
        digit * cycle_weight(index)
        for index, digit in enumerate(reversed_digits(number))
    )


def mod_eleven(total: int) -> int:
    return 11 - total % 11


def compute_check_digit(number: int) -> str:
    """Calcula el DV de `number`: un dígito '0'-'9' o 'K'."""

    residue = mod_eleven(sum_product(number))
    if residue == 10:
        return "K"
    if residue == 11:
        return "0"
    return str(residue)
