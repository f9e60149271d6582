"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    get_settings: Cached Settings singleton
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings block

Example:
    ```python
    from translations.configuration import get_settings

    settings = get_settings()
    default_locale = settings.i18n.default_locale
    ```
"""

from functools import lru_cache

from translations.configuration.i18n import I18nSettings
from translations.configuration.settings import Settings


@lru_cache
def get_settings() -> Settings:
    """Get process-wide settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


__all__ = ["get_settings", "Settings", "I18nSettings"]
