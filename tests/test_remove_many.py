"""Tests for remove_many."""

from collections import deque

import pytest
from bulk_collections import InvalidArgumentError
from bulk_collections import remove_many
from doubles import Bag
from sortedcontainers import SortedSet


def test_remove_many_from_list():
    """Each requested value is removed once."""
    items = [1, 2, 3, 4]

    result = remove_many(items, [2, 4])

    assert result is None
    assert items == [1, 3]


def test_remove_many_removes_first_occurrence_only():
    """One request removes a single occurrence."""
    items = [1, 2, 3, 2]

    remove_many(items, [2])

    assert items == [1, 3, 2]


def test_remove_many_repeated_request():
    """A value requested twice removes up to two occurrences."""
    items = [2, 1, 2, 2]

    remove_many(items, [2, 2])

    assert items == [1, 2]


def test_remove_many_repeated_request_single_occurrence():
    """Second request for an already removed value is a silent no-op."""
    items = [1, 2, 3]

    remove_many(items, [2, 2])

    assert items == [1, 3]


def test_remove_many_missing_values_ignored():
    """Values not present leave the collection unchanged."""
    items = [1, 2, 3]
    numbers = {1, 2, 3}

    remove_many(items, [7, 8])
    remove_many(numbers, [7, 8])

    assert items == [1, 2, 3]
    assert numbers == {1, 2, 3}


def test_remove_many_from_set():
    """Sets remove by their own equality."""
    numbers = {1, 2, 3}

    remove_many(numbers, [1, 3, 5])

    assert numbers == {2}


def test_remove_many_from_deque_and_sorted_set():
    """Non-list containers follow the same semantics."""
    queue = deque([1, 2, 3])
    ordered = SortedSet([5, 6, 7])

    remove_many(queue, [2, 9])
    remove_many(ordered, [9, 6])

    assert list(queue) == [1, 3]
    assert list(ordered) == [5, 7]


def test_remove_many_from_user_collection():
    """User collections reporting not-found with False are handled."""
    bag = Bag(["a", "b", "c"])

    remove_many(bag, ["b", "z"])

    assert list(bag) == ["a", "c"]


def test_remove_many_from_generator():
    """Lazy sequences are accepted."""
    items = [0, 1, 2, 3, 4]

    remove_many(items, (value for value in range(5) if value % 2))

    assert items == [0, 2, 4]


def test_remove_many_from_itself():
    """Removing a collection from itself empties it."""
    items = [1, 2, 2, 3]

    remove_many(items, items)

    assert items == []


def test_remove_many_none_collection():
    """None collection is rejected."""
    with pytest.raises(InvalidArgumentError, match="collection must not be None"):
        remove_many(None, [1])


def test_remove_many_none_values_does_not_mutate():
    """None values is rejected before any mutation."""
    items = [1, 2]

    with pytest.raises(InvalidArgumentError, match="values must not be None"):
        remove_many(items, None)

    assert items == [1, 2]


def test_remove_many_collection_without_remove():
    """Collections without remove() are rejected."""
    with pytest.raises(InvalidArgumentError, match="frozenset does not support removing elements"):
        remove_many(frozenset({1, 2}), [1])
