"""Typed errors for mapcache.

All errors inherit from MapCacheError and can optionally wrap a root
cause exception for debugging.

Looking up or invalidating a missing key is not an error, and neither is
storing None: those are normal outcomes reported through return values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MapCacheError(Exception):
    """Base error for the cache package.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class CacheConstructionError(MapCacheError):
    """The storage factory did not return a new, empty mapping.

    Raised once, at construction time. A populated mapping would leak
    entries from one logical cache into another.

    Attributes:
        initial_size: Number of entries found in the returned mapping
            (None when the factory returned no mapping at all)
    """

    initial_size: Optional[int] = None


@dataclass
class ConfigurationError(MapCacheError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
