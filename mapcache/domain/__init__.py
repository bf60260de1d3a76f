"""Domain layer - Core types shared by ports and adapters.

Contains the immutable ``Pair`` model and the typed error hierarchy.
Nothing in here depends on configuration or adapters.
"""

from .errors import CacheConstructionError, ConfigurationError, MapCacheError
from .models import Pair

__all__ = [
    "Pair",
    "MapCacheError",
    "CacheConstructionError",
    "ConfigurationError",
]
