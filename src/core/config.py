"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El bucle y los adaptadores de terminal leen los mismos valores (tick,
  timeout de polling, teclas de salida).
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "endzeit"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "endzeit"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "endzeit"
    return Path.home() / ".config" / "endzeit"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class RendererKind(str, Enum):
    """Renderers available for the countdown display."""

    AUTO = "auto"
    GAUGE = "gauge"
    PLAIN = "plain"

    def resolve(self, *, interactive: bool) -> "RendererKind":
        """Pick a concrete renderer; `auto` means gauge on a TTY, plain otherwise."""

        if self is RendererKind.AUTO:
            return RendererKind.GAUGE if interactive else RendererKind.PLAIN
        return self


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENDZEIT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    tick_interval_seconds: float = Field(
        default=0.25,
        gt=0,
        le=5.0,
        description="Periodo de cada tick del bucle (segundos).",
    )
    poll_timeout_seconds: float = Field(
        default=0.1,
        gt=0,
        description="Espera máxima por una tecla en cada tick (segundos).",
    )
    quit_keys: str = Field(
        default="q",
        min_length=1,
        description="Teclas que cancelan la cuenta atrás (cada carácter es una tecla).",
    )
    renderer: RendererKind = Field(
        default=RendererKind.AUTO,
        description="gauge (pantalla completa), plain (una línea) o auto.",
    )
    fail_on_command_error: bool = Field(
        default=False,
        description="Si el comando de finalización falla, salir con código distinto de 0.",
    )
    command_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Tiempo máximo del comando de finalización (segundos); sin límite si no se define.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    @model_validator(mode="after")
    def _poll_shorter_than_tick(self) -> "AppSettings":
        # El polling debe caber dentro del tick para acotar la latencia de 'q'.
        if self.poll_timeout_seconds >= self.tick_interval_seconds:
            raise ValueError("poll_timeout_seconds must be shorter than tick_interval_seconds")
        return self
