"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite apuntar el cliente a un servidor mock cambiando solo `base_url`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://boardgamegeek.com/xmlapi2"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "bgg-client"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "bgg-client"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "bgg-client"
    return Path.home() / ".config" / "bgg-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    La política de reintentos (202) es fija y no se expone aquí.
    """

    model_config = SettingsConfigDict(
        env_prefix="BGG_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL del XML API2 (sobrescribible para tests con servidor mock).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="bgg-client/0.1 (+https://boardgamegeek.com/xmlapi2)",
        min_length=1,
        description="User-Agent para las peticiones al API.",
    )

    def normalized_base_url(self) -> str:
        return self.base_url.rstrip("/")
