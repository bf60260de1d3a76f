"""Tests for configuration, logging setup and the DI container."""

import logging
from collections import OrderedDict

import pytest

from mapcache.adapters.cache import LockedDict, MapCache
from mapcache.config import AppConfig, CacheConfig, get_config, reset_config
from mapcache.container import Container, get_container, reset_container
from mapcache.observability import setup_logging
from mapcache.ports.cache import CachePort


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    for name in ("MAPCACHE_CACHE_STORAGE", "MAPCACHE_CACHE_NAME", "MAPCACHE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


def test_config_defaults():
    config = get_config()
    assert config.cache.storage == "dict"
    assert config.cache.name == "default"
    assert config.observability.level == "INFO"


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("MAPCACHE_CACHE_STORAGE", "locked")
    monkeypatch.setenv("MAPCACHE_CACHE_NAME", "sessions")
    monkeypatch.setenv("MAPCACHE_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.cache.storage == "locked"
    assert config.cache.name == "sessions"
    assert config.observability.level == "DEBUG"


def test_config_is_cached_until_reset():
    first = get_config()
    assert get_config() is first
    reset_config()
    assert get_config() is not first


def test_default_container_builds_configured_cache():
    config = AppConfig(cache=CacheConfig(storage="ordered", name="shared"))
    container = Container.create_default(config)

    cache = container.resolve(CachePort)

    assert isinstance(cache, MapCache)
    assert isinstance(cache._storage, OrderedDict)
    assert cache.name == "shared"
    assert container.resolve(CachePort) is cache


def test_container_register_overrides_binding():
    container = Container.create_default(AppConfig())
    container.register(CachePort, lambda: MapCache(LockedDict), singleton=False)

    first = container.resolve(CachePort)
    second = container.resolve(CachePort)

    assert isinstance(first._storage, LockedDict)
    assert first is not second


def test_container_unknown_type_raises():
    container = Container(config=AppConfig())
    assert CachePort not in container
    with pytest.raises(KeyError):
        container.resolve(CachePort)


def test_container_reregister_drops_shared_instance():
    container = Container.create_default(AppConfig())
    first = container.resolve(CachePort)
    container.register(CachePort, lambda: MapCache(dict))
    assert container.resolve(CachePort) is not first


def test_container_clear_removes_bindings():
    container = Container.create_default(AppConfig())
    assert CachePort in container
    container.clear()
    assert CachePort not in container


def test_global_container_uses_environment(monkeypatch):
    monkeypatch.setenv("MAPCACHE_CACHE_STORAGE", "locked")

    container = get_container()

    assert get_container() is container
    assert isinstance(container.resolve(CachePort)._storage, LockedDict)
    reset_container()
    assert CachePort not in container


def test_setup_logging_sets_package_level(monkeypatch):
    monkeypatch.setenv("MAPCACHE_LOG_LEVEL", "debug")
    logger = logging.getLogger("mapcache")
    previous = logger.level
    try:
        setup_logging()
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
