"""Environment configuration utilities.

Values are loaded from environment variables (or a ``.env`` file) and are
read once at startup.
"""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HistolineSettings(BaseSettings):
    """Top-level configuration container for histoline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        frozen=True,
        extra="ignore",
    )

    log_level: str = Field(alias="HISTOLINE_LOG_LEVEL", default="INFO")
    # YAML file holding histogram definitions (see histoline.catalog)
    catalog_path: str | None = Field(alias="HISTOLINE_CATALOG_PATH", default=None)
    # None -> compact JSON output
    json_indent: int | None = Field(alias="HISTOLINE_JSON_INDENT", default=None, ge=0)


def configure_logging(settings: HistolineSettings | None = None) -> None:
    """Install the root logging configuration for histoline processes."""

    settings = settings or HistolineSettings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


__all__ = ["HistolineSettings", "configure_logging"]
