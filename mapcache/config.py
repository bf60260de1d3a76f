"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- MAPCACHE_CACHE_STORAGE=locked
- MAPCACHE_CACHE_NAME=sessions
- MAPCACHE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheConfig(BaseSettings):
    """Default cache configuration.

    Environment variables prefixed with MAPCACHE_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPCACHE_CACHE_")

    storage: Literal["dict", "ordered", "locked"] = "dict"
    name: str = "default"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with MAPCACHE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPCACHE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.cache.storage)

    Environment variables prefixed with MAPCACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPCACHE_")

    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
