"""Tests for the typed error hierarchy."""

from mapcache.domain.errors import CacheConstructionError, ConfigurationError, MapCacheError


def test_message_only():
    error = MapCacheError("broken")
    assert str(error) == "broken"
    assert error.args == ("broken",)


def test_message_with_cause():
    error = MapCacheError("broken", cause=ValueError("bad value"))
    assert str(error) == "broken: bad value"


def test_subclasses_keep_fields():
    construction = CacheConstructionError("not empty", initial_size=3)
    configuration = ConfigurationError("unknown", setting_name="storage")

    assert isinstance(construction, MapCacheError)
    assert isinstance(configuration, MapCacheError)
    assert construction.initial_size == 3
    assert configuration.setting_name == "storage"
    assert configuration.expected_type is None
