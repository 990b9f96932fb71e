"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que servicios y adaptadores lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import URLPreference


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "entry-facade"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "entry-facade"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "entry-facade"
    return Path.home() / ".config" / "entry-facade"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTRY_FACADE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_url_preference: URLPreference = Field(
        default=URLPreference.ANY,
        description="Preferencia de URL cuando la CLI no recibe --preference.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging para la CLI.",
    )
    mask_character: str = Field(
        default="•",
        min_length=1,
        max_length=1,
        description="Carácter con el que la CLI enmascara valores secretos.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value
