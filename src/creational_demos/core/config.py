"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los flags de la CLI solo sobrescriben estos valores para una ejecución.
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from creational_demos.core.domain.language import Language


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para la CLI y las demos.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREATIONAL_DEMOS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma por defecto de la salida de las demos (en/pt).",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner Rich antes de ejecutar las demos.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


def load_settings() -> tuple[AppSettings, list[str]]:
    """Load `AppSettings`, falling back to defaults when env/.env is invalid.

    Returns the settings and the names of the fields that failed validation
    (empty when everything loaded).
    """

    try:
        return AppSettings(), []
    except ValidationError as exc:
        fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
        return AppSettings.model_construct(), fields
