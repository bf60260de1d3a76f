"""Top-level package for mapcache.

mapcache is a small in-memory key-value cache that wraps a mapping
supplied by the caller. The package follows a ports and adapters layout:

- ``ports``: the cache contract (``CachePort``)
- ``adapters``: the concrete ``MapCache`` and its storage factories
- ``domain``: the ``Pair`` model and typed errors
"""

from .adapters.cache import LockedDict, MapCache, storage_factory
from .config import AppConfig, get_config, reset_config
from .container import Container, get_container, reset_container
from .domain.errors import CacheConstructionError, ConfigurationError, MapCacheError
from .domain.models import Pair
from .ports.cache import CachePort, StorageFactory

__all__ = [
    "MapCache",
    "LockedDict",
    "storage_factory",
    "CachePort",
    "StorageFactory",
    "Pair",
    "MapCacheError",
    "CacheConstructionError",
    "ConfigurationError",
    "AppConfig",
    "get_config",
    "reset_config",
    "Container",
    "get_container",
    "reset_container",
]
