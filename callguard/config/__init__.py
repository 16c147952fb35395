"""Configuration loading for callguard.

Usage:
    from callguard.config import get_settings

    settings = get_settings()
    price = settings.billing.seat_price
"""

from functools import lru_cache

from callguard.config.loader import load_config
from callguard.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{CALLGUARD_ENV}.toml (environment overrides)
    4. CALLGUARD_* environment variables (runtime overrides)

    The result is cached for the lifetime of the process.
    Call ``get_settings.cache_clear()`` or ``reload_settings()`` to reload.

    Returns:
        Settings instance with all configuration loaded and validated
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration.

    Useful for tests or after configuration files change.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
