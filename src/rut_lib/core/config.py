"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El dominio no lee configuración: la CLI la traduce a argumentos explícitos
  (formato, fuente aleatoria).
"""

from __future__ import annotations

import random

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rut_lib.core.domain.models import Format
from rut_lib.core.domain.range import default_random_source
from rut_lib.core.interfaces.random_source import RandomSource


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el dominio.
    - Un único contrato de configuración para la CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="RUT_LIB_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_format: Format = Field(
        default=Format.DASH,
        description="Formato de salida cuando no se pasa --format (dots/dash/none).",
    )
    random_seed: int | None = Field(
        default=None,
        description="Semilla para generar RUTs reproducibles (None = fuente del sistema).",
    )
    generate_count: int = Field(
        default=1,
        ge=1,
        le=10_000,
        description="Cantidad de RUTs por defecto para `generate`.",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner en comandos interactivos.",
    )


def build_random_source(settings: AppSettings, seed: int | None = None) -> RandomSource:
    """Fuente aleatoria según config: sembrada si hay semilla, del sistema si no."""

    seed = seed if seed is not None else settings.random_seed
    if seed is None:
        return default_random_source()
    return random.Random(seed)
