"""
Mise Core - Configuration and settings.

CoreSettings contains only what every Mise package needs.
Application settings live in mise_kitchen.config.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class CoreSettings(BaseSettings):
    """
    Core settings shared by all packages.

    The unifier itself takes no configuration; these fields only drive
    environment and logging behavior around it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    mise_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def is_development(self) -> bool:
        return self.mise_env == "development"

    @property
    def is_production(self) -> bool:
        return self.mise_env == "production"


@lru_cache
def get_core_settings() -> CoreSettings:
    """Get cached CoreSettings instance."""
    return CoreSettings()


class _CoreSettingsProxy:
    """Lazy proxy so importing mise.config never reads .env."""

    _instance: CoreSettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_core_settings()
        return getattr(self._instance, name)


core_settings = _CoreSettingsProxy()
