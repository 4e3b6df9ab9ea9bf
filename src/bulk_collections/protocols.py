"""Capability protocols for caller-owned collections.

Per KERNEL_PHILOSOPHY: Protocol-based extensibility over type inspection.
Per IMPLEMENTATION_PHILOSOPHY: Fast path when available, correct path always.

Each protocol names one narrow capability. Operations probe for the richest
capability at call time and fall back to single-element add/remove otherwise.
"""

from collections.abc import Callable
from collections.abc import Iterable
from typing import Any
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class SupportsAdd(Protocol):
    """Single-element add (set-like collections)."""

    def add(self, value: Any) -> Any: ...


@runtime_checkable
class SupportsAppend(Protocol):
    """Single-element append (sequence-like collections)."""

    def append(self, value: Any) -> Any: ...


@runtime_checkable
class SupportsRemove(Protocol):
    """Single-element remove by value.

    Not-found is reported either by raising ValueError/KeyError (builtin
    containers) or by returning False.
    """

    def remove(self, value: Any) -> Any: ...


@runtime_checkable
class OrderedBulkAppend(Protocol):
    """Ordered bulk append, e.g. list.extend or deque.extend."""

    def extend(self, values: Iterable[Any]) -> Any: ...


@runtime_checkable
class SetUnion(Protocol):
    """Set semantics with an in-place union, e.g. set.update."""

    def update(self, *others: Iterable[Any]) -> Any: ...

    def add(self, value: Any) -> Any: ...

    def discard(self, value: Any) -> Any: ...


@runtime_checkable
class IndexableRemoval(Protocol):
    """Order-stable random access with removal by position.

    Satisfied by list, collections.deque and sorted containers.
    """

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Any: ...

    def __delitem__(self, index: int) -> None: ...

    def index(self, value: Any) -> int: ...


@runtime_checkable
class NativePredicateRemove(Protocol):
    """Collection-provided predicate removal.

    Implementations must evaluate the predicate once per element and return
    the number of removed elements.
    """

    def remove_where(self, predicate: Callable[[Any], bool]) -> int:
        """Remove every element matching predicate.

        Args:
            predicate: Unary predicate selecting elements to remove

        Returns:
            Number of elements removed
        """
        ...
