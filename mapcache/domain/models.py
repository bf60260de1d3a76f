"""Immutable domain models.

Pair is the only model: the (key, value) tuple handed out by
``entries()`` and expected back from ``map()`` transforms.
"""

from __future__ import annotations

from typing import Generic, NamedTuple, Tuple, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class Pair(NamedTuple, Generic[A, B]):
    """An immutable ordered pair.

    Being a tuple, a Pair unpacks like a mapping item::

        for key, value in cache.entries():
            ...

    Attributes:
        first: First element (the key, when used as a cache entry)
        second: Second element (the value, when used as a cache entry)
    """

    first: A
    second: B

    @classmethod
    def of(cls, first: A, second: B) -> Pair[A, B]:
        """Create a pair from two elements."""
        return cls(first, second)

    @classmethod
    def from_entry(cls, entry: Tuple[A, B]) -> Pair[A, B]:
        """Create a pair from a mapping item such as ``dict.items()`` yields."""
        first, second = entry
        return cls(first, second)

    def swap(self) -> Pair[B, A]:
        """Return a new pair with the elements exchanged."""
        return Pair(self.second, self.first)
