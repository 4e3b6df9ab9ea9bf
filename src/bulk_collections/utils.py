"""Argument validation and single-element primitives.

Per DRY: Central helpers eliminate duplicated None/iterable checks across operations.
"""

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from typing import Any

from .capabilities import AddStrategy
from .exceptions import InvalidArgumentError


def require_argument(value: Any, name: str) -> Any:
    """Reject an absent argument.

    Args:
        value: Argument value
        name: Parameter name, reported in the error context

    Returns:
        The value unchanged

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None", {"argument": name})
    return value


def require_iterable(values: Iterable[Any] | None, name: str = "values") -> Iterator[Any]:
    """Validate an element sequence and return a single-use iterator over it.

    Raises:
        InvalidArgumentError: If values is None or not iterable
    """
    require_argument(values, name)
    try:
        return iter(values)
    except TypeError as e:
        raise InvalidArgumentError(
            f"{name} must be iterable, got {type(values).__name__}",
            {"argument": name, "type": type(values).__name__},
        ) from e


def require_callable(predicate: Callable[..., Any] | None, name: str = "predicate") -> Callable[..., Any]:
    """Validate a predicate.

    Raises:
        InvalidArgumentError: If predicate is None or not callable
    """
    require_argument(predicate, name)
    if not callable(predicate):
        raise InvalidArgumentError(
            f"{name} must be callable, got {type(predicate).__name__}",
            {"argument": name, "type": type(predicate).__name__},
        )
    return predicate


def unsupported_collection(collection: Any, operation: str) -> InvalidArgumentError:
    """Build the error for a collection lacking the minimum interface of an operation."""
    type_name = type(collection).__name__
    return InvalidArgumentError(
        f"{type_name} does not support {operation}",
        {"argument": "collection", "type": type_name},
    )


def append_one(collection: Any, value: Any, strategy: AddStrategy) -> None:
    """Add a single element using the collection's own add or append."""
    if strategy is AddStrategy.ADD:
        collection.add(value)
    else:
        collection.append(value)


def remove_one(collection: Any, value: Any) -> bool:
    """
    Remove one occurrence of value.

    Args:
        collection: Collection exposing remove(value)
        value: Element to remove

    Returns:
        True if an element was found and removed, False otherwise

    Note:
        Builtin containers signal not-found with ValueError (list, deque) or
        KeyError (set). User collections may instead return False.
    """
    try:
        result = collection.remove(value)
    except (ValueError, KeyError):
        return False
    return result is not False
