"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que el código cliente puede implementar.
- Permite inyectar capacidades (p.ej. la fuente aleatoria) sin acoplar el dominio.
"""

from rut_lib.core.interfaces.random_source import RandomSource

__all__ = ["RandomSource"]
