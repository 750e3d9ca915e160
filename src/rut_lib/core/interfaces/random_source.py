"""Contrato de la fuente aleatoria.

Por qué Protocol:
- `random.Random`, `random.SystemRandom` o un stub de test cumplen el contrato
  sin heredar de nada.
- Mantiene la generación de RUTs pura salvo por esta capacidad inyectada.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Mínimo necesario para muestrear un número en un intervalo semiabierto."""

    def randrange(self, start: int, stop: int) -> int:
        """Devuelve un entero uniforme en `[start, stop)`."""

        ...
