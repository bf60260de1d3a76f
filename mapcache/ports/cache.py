"""Cache port - Injectable caching abstraction.

This protocol defines the contract every cache adapter fulfils. Absence
is reported as None rather than raised: a cache never stores None, so a
None result always means "no value".
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    MutableMapping,
    Optional,
    Protocol,
    Set,
    Tuple,
    TypeVar,
)

if TYPE_CHECKING:
    from ..domain.models import Pair

K = TypeVar("K")
V = TypeVar("V")
A = TypeVar("A")
B = TypeVar("B")

# Zero-argument callable producing a new, empty mapping for cache storage.
StorageFactory = Callable[[], MutableMapping[K, V]]


class CachePort(Protocol[K, V]):
    """Port for caching.

    Implementation:
    - adapters/cache/map_cache.py (MapCache)

    Storage, and with it thread-safety, is chosen by the caller through
    the storage factory handed to the adapter.
    """

    def lookup(self, key: K) -> Optional[V]:
        """Look up the value stored for a key.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if the key is not present.
        """
        ...

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Look up a key, falling back to a default.

        Args:
            key: The cache key.
            default: Value returned when the key is not present.

        Returns:
            The cached value, or ``default``.
        """
        ...

    def store(self, key: K, value: Optional[V]) -> Optional[V]:
        """Insert or overwrite the value for a key.

        Storing None does nothing and returns None.

        Args:
            key: The cache key.
            value: The value to cache.

        Returns:
            The value previously stored for the key, or None.
        """
        ...

    def store_pair(self, pair: Pair[K, V]) -> Optional[V]:
        """Store a (key, value) pair. Same semantics as ``store``."""
        ...

    def invalidate(self, key: K) -> Optional[V]:
        """Remove a key from the cache.

        Args:
            key: The cache key to invalidate.

        Returns:
            The removed value, or None if the key was not present.
        """
        ...

    def entries(self) -> Set[Pair[K, V]]:
        """Return a snapshot of all entries.

        Returns:
            A new set of pairs; changing it does not change the cache.
        """
        ...

    def map(
        self,
        transform: Callable[[K, V], Tuple[A, B]],
        factory: Optional[StorageFactory[A, B]] = None,
    ) -> CachePort[A, B]:
        """Build a new cache by transforming every entry.

        Args:
            transform: Function mapping (key, value) to a new (key, value).
            factory: Storage factory for the new cache. Defaults to the
                factory of this cache.

        Returns:
            A new, populated cache. This cache is left unchanged.
        """
        ...

    def size(self) -> int:
        """Return the number of entries in the cache.

        Returns:
            Current number of cached entries.
        """
        ...
