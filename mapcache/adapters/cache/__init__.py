"""Cache adapters - Implementations of the CachePort.

Available implementations:
- MapCache: cache over a caller-supplied mapping
- LockedDict: RLock-guarded mapping for thread-safe storage
"""

from .map_cache import MapCache
from .storage import STORAGE_KINDS, LockedDict, storage_factory

__all__ = ["MapCache", "LockedDict", "STORAGE_KINDS", "storage_factory"]
