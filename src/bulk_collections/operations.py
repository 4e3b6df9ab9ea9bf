"""Bulk add and remove operations over caller-owned collections.

All operations mutate the collection in place and never replace it. Arguments
are validated before any mutation. Predicates run synchronously and must not
modify the collection; a size change observed mid-scan raises
CollectionModifiedError.

Per IMPLEMENTATION_PHILOSOPHY:
- Fast path when the collection offers one (see capabilities.py)
- Element-by-element fallback otherwise, with identical observable results
"""

import logging
from collections.abc import Callable
from collections.abc import Iterable
from typing import Any

from .capabilities import AddStrategy
from .capabilities import RemovalStrategy
from .capabilities import probe_capabilities
from .exceptions import CollectionModifiedError
from .utils import append_one
from .utils import remove_one
from .utils import require_argument
from .utils import require_callable
from .utils import require_iterable
from .utils import unsupported_collection

logger = logging.getLogger(__name__)


def add_many(collection: Any, values: Iterable[Any]) -> None:
    """
    Add every element of values to collection, in iteration order.

    Duplicates are kept unless the collection itself enforces uniqueness.

    Args:
        collection: Collection to grow
        values: Elements to add (consumed once)

    Raises:
        InvalidArgumentError: If an argument is None, values is not iterable,
            or collection cannot add elements

    Example:
        >>> items = [1]
        >>> add_many(items, (2, 3))
        >>> items
        [1, 2, 3]
    """
    require_argument(collection, "collection")
    if values is collection:
        values = list(values)
    iterator = require_iterable(values)

    capabilities = probe_capabilities(collection)
    strategy = capabilities.add_strategy
    if strategy is None:
        raise unsupported_collection(collection, "adding elements")

    size_before = len(collection)

    if strategy is AddStrategy.UNION:
        collection.update(iterator)
    elif strategy is AddStrategy.EXTEND:
        collection.extend(iterator)
    else:
        for value in iterator:
            append_one(collection, value, strategy)

    logger.debug(
        f"add_many via {strategy.value} (fast_path={capabilities.has_fast_path()}): "
        f"{size_before} -> {len(collection)} elements"
    )


def remove_many(collection: Any, values: Iterable[Any]) -> None:
    """
    Remove one occurrence of each element of values from collection.

    Elements not present are ignored. A value repeated in values removes up
    to that many occurrences.

    Args:
        collection: Collection to shrink
        values: Elements to remove (consumed once)

    Raises:
        InvalidArgumentError: If an argument is None, values is not iterable,
            or collection cannot remove elements
    """
    require_argument(collection, "collection")
    if values is collection:
        values = list(values)
    iterator = require_iterable(values)

    if not probe_capabilities(collection).can_remove:
        raise unsupported_collection(collection, "removing elements")

    removed = _remove_each(collection, iterator)
    logger.debug(f"remove_many removed {removed} elements")


def remove_where(collection: Any, predicate: Callable[[Any], bool]) -> int:
    """
    Remove every element for which predicate returns true.

    The predicate is evaluated once per element against the collection as it
    was when the call started.

    Args:
        collection: Collection to filter in place
        predicate: Unary predicate selecting elements to remove

    Returns:
        Number of elements removed

    Raises:
        InvalidArgumentError: If an argument is None, predicate is not
            callable, or collection cannot remove elements
        CollectionModifiedError: If predicate changes the collection's size

    Example:
        >>> items = [1, 2, 3, 4, 5]
        >>> remove_where(items, lambda x: x % 2 == 0)
        2
        >>> items
        [1, 3, 5]
    """
    require_argument(collection, "collection")
    require_callable(predicate)

    capabilities = probe_capabilities(collection)
    strategy = capabilities.removal_strategy
    if strategy is None:
        raise unsupported_collection(collection, "removing elements")

    if strategy is RemovalStrategy.NATIVE:
        removed = int(collection.remove_where(predicate))
    else:
        removed = _dispatch_indexed(collection, lambda item, _index: predicate(item), strategy)

    logger.debug(
        f"remove_where via {strategy.value} (fast_path={capabilities.has_fast_path()}) removed {removed} elements"
    )
    return removed


def remove_where_indexed(collection: Any, predicate: Callable[[Any, int], bool]) -> int:
    """
    Remove every element for which predicate(element, position) returns true.

    Positions are zero-based indices in iteration order, assigned once before
    any removal and never recomputed.

    Args:
        collection: Collection to filter in place
        predicate: Binary predicate over element and its position

    Returns:
        Number of elements removed

    Raises:
        InvalidArgumentError: If an argument is None, predicate is not
            callable, or collection cannot remove elements
        CollectionModifiedError: If predicate changes the collection's size

    Example:
        >>> items = [10, 20, 30, 40]
        >>> remove_where_indexed(items, lambda _x, i: i % 2 == 1)
        2
        >>> items
        [10, 30]
    """
    require_argument(collection, "collection")
    require_callable(predicate)

    capabilities = probe_capabilities(collection)
    strategy = capabilities.indexed_removal_strategy
    if strategy is None:
        raise unsupported_collection(collection, "removing elements")

    removed = _dispatch_indexed(collection, predicate, strategy)

    logger.debug(
        f"remove_where_indexed via {strategy.value} (fast_path={capabilities.has_fast_path()}) "
        f"removed {removed} elements"
    )
    return removed


def _dispatch_indexed(collection: Any, predicate: Callable[[Any, int], bool], strategy: RemovalStrategy) -> int:
    if strategy is RemovalStrategy.INDEXED:
        return _remove_at_where(collection, predicate)
    return _remove_snapshot_where(collection, predicate)


def _remove_at_where(collection: Any, predicate: Callable[[Any, int], bool]) -> int:
    """Scan from the last position to the first, deleting matches by position.

    Deleting at i never shifts positions below i, so each element is tested
    at its pre-call position.
    """
    expected_size = len(collection)
    removed = 0

    for index in range(expected_size - 1, -1, -1):
        matched = predicate(collection[index], index)
        _check_unmodified(collection, expected_size)
        if not matched:
            continue

        del collection[index]
        removed += 1
        expected_size -= 1

    return removed


def _remove_snapshot_where(collection: Any, predicate: Callable[[Any, int], bool]) -> int:
    """Collect matches in one forward pass, then remove them by value."""
    expected_size = len(collection)
    matches = []

    for index, item in enumerate(collection):
        if predicate(item, index):
            matches.append(item)
        _check_unmodified(collection, expected_size)

    # Count what the collection actually removed; its remove() may not find
    # an element it just yielded (e.g. NaN under == only)
    return _remove_each(collection, matches)


def _remove_each(collection: Any, values: Iterable[Any]) -> int:
    return sum(1 for value in values if remove_one(collection, value))


def _check_unmodified(collection: Any, expected_size: int) -> None:
    actual_size = len(collection)
    if actual_size != expected_size:
        raise CollectionModifiedError(
            f"Collection size changed from {expected_size} to {actual_size} during predicate evaluation",
            {"expected_size": expected_size, "actual_size": actual_size},
        )
