"""
Mise Kitchen - Configuration and settings.

KitchenSettings extends CoreSettings with recipe application fields.
"""

from functools import lru_cache

from mise.config import CoreSettings


class KitchenSettings(CoreSettings):
    """
    Kitchen application settings.

    Extends CoreSettings with import and sharing configuration.
    """

    # Sharing
    share_app_name: str = "RecipeApp"  # Shown in the header of shared recipe text

    # Import
    recipe_id_prefix: str = "recipe"  # Imported recipes get "<prefix>_<epoch millis>"


@lru_cache
def get_settings() -> KitchenSettings:
    """Get cached settings instance."""
    return KitchenSettings()


# Convenience singleton - lazy loaded
class _SettingsProxy:
    """Lazy proxy for settings to avoid loading .env at import time."""

    _instance: KitchenSettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _SettingsProxy()
