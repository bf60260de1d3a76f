"""In-memory cache over a caller-supplied mapping.

MapCache owns exactly one mapping, created by calling the storage
factory once at construction. The factory is kept so that ``map()`` can
build the storage of the cache it returns.

None is never stored, which keeps None free to mean "absent" in every
return value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    MutableMapping,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from ...domain.errors import CacheConstructionError
from ...domain.models import Pair
from ...ports.cache import StorageFactory
from .storage import LockedDict

K = TypeVar("K")
V = TypeVar("V")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(eq=False)
class MapCache(Generic[K, V]):
    """Cache backed by a mapping produced by an injected factory.

    This cache implements the CachePort protocol. Thread-safety is that
    of the storage. With ``LockedDict`` every operation, including the
    read-and-replace of ``store``, happens under one lock hold; any other
    mapping is read and then written.

    Attributes:
        factory: Zero-argument callable returning a new, empty mapping
        name: Cache name for logging

    Example:
        cache = MapCache(dict, name="users")
        cache.store("ada", 36)
        ages = cache.map(lambda name, age: (name.upper(), age + 1))
    """

    factory: StorageFactory
    name: str = "cache"

    _storage: MutableMapping[K, V] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"mapcache.cache.{self.name}")

        storage = self.factory()
        if storage is None:
            raise CacheConstructionError(
                "Storage factory must return a new, empty mapping, got None"
            )
        if len(storage) > 0:
            raise CacheConstructionError(
                "Storage factory must return a new, empty mapping",
                initial_size=len(storage),
            )
        self._storage = storage
        self._logger.debug(
            "Cache created",
            extra={"storage": type(storage).__name__},
        )

    def lookup(self, key: K) -> Optional[V]:
        """Look up the value stored for a key.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if the key is not present.
        """
        return self._storage.get(key)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Look up a key, returning ``default`` when it is not present."""
        value = self._storage.get(key)
        return default if value is None else value

    def store(self, key: K, value: Optional[V]) -> Optional[V]:
        """Insert or overwrite the value for a key.

        Storing None is a no-op: the cache never holds None.

        Args:
            key: The cache key.
            value: The value to cache.

        Returns:
            The value previously stored for the key, or None.
        """
        if value is None:
            self._logger.debug("Ignored None value", extra={"key": key})
            return None

        if isinstance(self._storage, LockedDict):
            previous = self._storage.put(key, value)
        else:
            previous = self._storage.get(key)
            self._storage[key] = value
        self._logger.debug(
            "Cache entry stored",
            extra={"key": key, "replaced": previous is not None},
        )
        return previous

    def store_pair(self, pair: Pair[K, V]) -> Optional[V]:
        """Store a (key, value) pair. Same semantics as ``store``."""
        key, value = pair
        return self.store(key, value)

    def invalidate(self, key: K) -> Optional[V]:
        """Remove a key from the cache.

        Args:
            key: The cache key to invalidate.

        Returns:
            The removed value, or None if the key was not present.
        """
        removed = self._storage.pop(key, None)
        if removed is not None:
            self._logger.debug("Cache entry invalidated", extra={"key": key})
        return removed

    def entries(self) -> Set[Pair[K, V]]:
        """Return a snapshot of all entries.

        Keys and values must be hashable to be collected into the set.

        Returns:
            A new set of pairs, in no particular order. Changing it does
            not change the cache.
        """
        return {Pair.from_entry(item) for item in self._contents().items()}

    def map(
        self,
        transform: Callable[[K, V], Tuple[A, B]],
        factory: Optional[StorageFactory] = None,
    ) -> MapCache[A, B]:
        """Build a new cache by transforming every entry.

        Entries are replayed from a snapshot, so the transform may read
        this cache freely. When two entries transform to the same key the
        one processed last wins; the processing order is unspecified.

        Args:
            transform: Function mapping (key, value) to a new (key, value).
            factory: Storage factory for the new cache. Defaults to the
                factory of this cache.

        Returns:
            A new, populated cache. This cache is left unchanged.
        """
        mapped: MapCache[A, B] = MapCache(factory or self.factory, name=self.name)
        snapshot = self._contents()
        for key, value in snapshot.items():
            mapped.store_pair(Pair.from_entry(transform(key, value)))

        self._logger.debug(
            "Cache mapped",
            extra={"source_size": len(snapshot), "mapped_size": mapped.size()},
        )
        return mapped

    def size(self) -> int:
        """Return the number of entries in the cache.

        Returns:
            Current number of cached entries.
        """
        return len(self._storage)

    def _contents(self) -> Dict[K, V]:
        if isinstance(self._storage, LockedDict):
            return self._storage.snapshot()
        return dict(self._storage)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return key in self._storage

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, MapCache):
            return NotImplemented
        return self._contents() == other._contents()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, underlying={self._storage!r})"
