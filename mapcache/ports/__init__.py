"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contract between callers and the cache adapters, so
code that consumes a cache can depend on ``CachePort`` alone.
"""

from .cache import CachePort, StorageFactory

__all__ = ["CachePort", "StorageFactory"]
