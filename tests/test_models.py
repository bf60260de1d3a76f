"""Tests for the Pair model."""

import pytest

from mapcache.domain.models import Pair


def test_pair_fields():
    pair = Pair("k", 1)
    assert pair.first == "k"
    assert pair.second == 1


def test_pair_unpacks():
    key, value = Pair.of("k", 1)
    assert (key, value) == ("k", 1)


def test_pair_from_entry():
    assert Pair.from_entry(("k", 1)) == Pair("k", 1)
    assert [Pair.from_entry(item) for item in {"a": 1}.items()] == [Pair("a", 1)]


def test_pair_swap():
    assert Pair("k", 1).swap() == Pair(1, "k")


def test_pair_is_immutable():
    pair = Pair("k", 1)
    with pytest.raises(AttributeError):
        pair.first = "other"


def test_pairs_hash_by_value():
    assert len({Pair("k", 1), Pair("k", 1), Pair("k", 2)}) == 2
