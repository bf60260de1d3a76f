"""Dependency injection container.

Binds port types to factories so callers can ask for a ``CachePort``
without knowing which storage backs it. Bindings are shared (one
instance, built on first resolve) unless registered with
``singleton=False``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Port-to-factory bindings for one configuration.

    Usage:
        container = Container.create_default()
        cache = container.resolve(CachePort)

        container.register(CachePort, lambda: MapCache(OrderedDict))

    Attributes:
        config: Configuration the default bindings are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _shared: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _per_call: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind a port type, replacing any earlier binding and its instance."""
        with self._lock:
            self._bindings[port_type] = factory
            self._shared.pop(port_type, None)
            if singleton:
                self._per_call.discard(port_type)
            else:
                self._per_call.add(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance bound to a port type.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        with self._lock:
            factory = self._bindings.get(port_type)
            if factory is None:
                raise KeyError(f"Type not registered: {port_type}")
            if port_type in self._per_call:
                return factory()
            if port_type not in self._shared:
                self._shared[port_type] = factory()
            return self._shared[port_type]

    def clear(self) -> None:
        """Drop every binding and shared instance."""
        with self._lock:
            self._bindings.clear()
            self._shared.clear()
            self._per_call.clear()

    def __contains__(self, port_type: object) -> bool:
        return port_type in self._bindings

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container binding ``CachePort`` to a configured MapCache.

        The cache uses the storage kind and name from ``config.cache``.

        Raises:
            ConfigurationError: If the configured storage kind is unknown.
        """
        from .adapters.cache import MapCache, storage_factory
        from .ports.cache import CachePort

        config = config or get_config()
        container = cls(config=config)

        factory = storage_factory(config.cache.storage)
        container.register(
            CachePort,
            lambda: MapCache(factory, name=config.cache.name),
        )
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default container, creating it on first use."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Forget the default container. Call this in tests for a fresh one."""
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear()
        _default_container = None
