"""Storage factories for MapCache.

A cache is only as thread-safe as its storage. ``dict`` and
``OrderedDict`` are fine for single-threaded use; ``LockedDict`` takes
an RLock around every single operation. None of them make compound
operations such as lookup-then-store atomic.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Dict, Iterator, MutableMapping, Optional, TypeVar

from ...domain.errors import ConfigurationError
from ...ports.cache import StorageFactory

K = TypeVar("K")
V = TypeVar("V")


class LockedDict(MutableMapping[K, V]):
    """Dict wrapper with every operation guarded by an RLock.

    Iteration walks a copy of the keys taken under the lock, so other
    threads may keep writing while a caller iterates.
    """

    def __init__(self) -> None:
        self._data: Dict[K, V] = {}
        self._lock = threading.RLock()

    def __getitem__(self, key: K) -> V:
        with self._lock:
            return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def __delitem__(self, key: K) -> None:
        with self._lock:
            del self._data[key]

    def __iter__(self) -> Iterator[K]:
        with self._lock:
            keys = list(self._data)
        return iter(keys)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        with self._lock:
            return self._data.get(key, default)

    def pop(self, key: K, *default: V) -> V:
        with self._lock:
            return self._data.pop(key, *default)

    def put(self, key: K, value: V) -> Optional[V]:
        """Set a value and return the one it replaced, in one locked step."""
        with self._lock:
            previous = self._data.get(key)
            self._data[key] = value
            return previous

    def snapshot(self) -> Dict[K, V]:
        """Return a consistent copy of the contents."""
        with self._lock:
            return dict(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.snapshot()!r})"


STORAGE_KINDS: Dict[str, StorageFactory] = {
    "dict": dict,
    "ordered": OrderedDict,
    "locked": LockedDict,
}


def storage_factory(kind: str) -> StorageFactory:
    """Resolve a storage factory by name.

    Args:
        kind: One of ``dict``, ``ordered`` or ``locked``.

    Returns:
        A zero-argument callable returning a new, empty mapping.

    Raises:
        ConfigurationError: If the name is unknown.
    """
    try:
        return STORAGE_KINDS[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown storage kind {kind!r}",
            setting_name="storage",
            expected_type=" | ".join(STORAGE_KINDS),
        ) from None
