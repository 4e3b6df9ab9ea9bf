"""Tests for validation helpers and single-element primitives."""

import pytest
from bulk_collections import InvalidArgumentError
from bulk_collections.capabilities import AddStrategy
from bulk_collections.utils import append_one
from bulk_collections.utils import remove_one
from bulk_collections.utils import require_argument
from bulk_collections.utils import require_callable
from bulk_collections.utils import require_iterable
from doubles import Bag
from doubles import Journal


def test_remove_one_builtin_not_found():
    """ValueError and KeyError mean not found."""
    assert remove_one([1, 2], 3) is False
    assert remove_one({1, 2}, 3) is False


def test_remove_one_found():
    """Found elements are removed."""
    items = [1, 2, 1]

    assert remove_one(items, 1) is True
    assert items == [2, 1]


def test_remove_one_user_collection():
    """A False return means not found."""
    bag = Bag(["x"])

    assert remove_one(bag, "y") is False
    assert remove_one(bag, "x") is True
    assert len(bag) == 0


def test_append_one():
    """add() or append() is chosen by strategy."""
    bag = Bag()
    journal = Journal()

    append_one(bag, 1, AddStrategy.ADD)
    append_one(journal, 2, AddStrategy.APPEND)

    assert list(bag) == [1]
    assert list(journal) == [2]


def test_require_argument():
    """None is rejected with the parameter name in context."""
    assert require_argument(0, "value") == 0

    with pytest.raises(InvalidArgumentError) as exc_info:
        require_argument(None, "value")

    assert exc_info.value.message == "value must not be None"
    assert exc_info.value.context == {"argument": "value"}


def test_require_iterable_returns_iterator():
    """Validated sequences come back as an iterator."""
    iterator = require_iterable([1, 2])

    assert next(iterator) == 1
    assert list(iterator) == [2]


def test_require_iterable_rejects_non_iterable():
    """Non-iterables are rejected with their type name."""
    with pytest.raises(InvalidArgumentError) as exc_info:
        require_iterable(3.5)

    assert exc_info.value.context == {"argument": "values", "type": "float"}


def test_require_callable():
    """Non-callables are rejected."""
    assert require_callable(len) is len

    with pytest.raises(InvalidArgumentError, match="predicate must be callable, got str"):
        require_callable("not callable")
