"""Collection capability probing - Pick the fastest correct code path.

Per KERNEL_PHILOSOPHY:
- "Could two collections want different behavior?" → YES (fast paths are per-type)
- Capabilities are discovered from the methods a collection exposes, never from its concrete type

Per IMPLEMENTATION_PHILOSOPHY:
- Ruthless simplicity: Direct protocol checks at call time, no caching
- YAGNI: Only probe capabilities an operation actually dispatches on
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict

from .exceptions import InvalidArgumentError
from .protocols import IndexableRemoval
from .protocols import NativePredicateRemove
from .protocols import OrderedBulkAppend
from .protocols import SetUnion
from .protocols import SupportsAdd
from .protocols import SupportsAppend
from .protocols import SupportsRemove


class AddStrategy(str, Enum):
    """How add_many inserts elements."""

    UNION = "union"
    EXTEND = "extend"
    ADD = "add"
    APPEND = "append"


class RemovalStrategy(str, Enum):
    """How remove_where / remove_where_indexed remove elements."""

    NATIVE = "native"
    INDEXED = "indexed"
    SNAPSHOT = "snapshot"


class CollectionCapabilities(BaseModel):
    """Capabilities a collection satisfies (immutable data structure)."""

    model_config = ConfigDict(frozen=True)

    # Minimum interface
    can_add: bool = False
    can_append: bool = False
    can_remove: bool = False

    # Optional fast paths
    ordered_bulk_append: bool = False
    set_union: bool = False
    indexable_removal: bool = False
    native_predicate_remove: bool = False

    @property
    def add_strategy(self) -> AddStrategy | None:
        """Strategy used by add_many, or None if the collection cannot grow.

        Union is checked before extend: sorted containers expose extend/append
        only as methods raising NotImplementedError.
        """
        if self.set_union:
            return AddStrategy.UNION
        if self.ordered_bulk_append:
            return AddStrategy.EXTEND
        if self.can_add:
            return AddStrategy.ADD
        if self.can_append:
            return AddStrategy.APPEND
        return None

    @property
    def removal_strategy(self) -> RemovalStrategy | None:
        """Strategy used by remove_where (value predicate)."""
        if self.native_predicate_remove:
            return RemovalStrategy.NATIVE
        return self.indexed_removal_strategy

    @property
    def indexed_removal_strategy(self) -> RemovalStrategy | None:
        """Strategy used by remove_where_indexed (element, position predicate)."""
        if self.indexable_removal:
            return RemovalStrategy.INDEXED
        if self.can_remove:
            return RemovalStrategy.SNAPSHOT
        return None

    def has_fast_path(self) -> bool:
        """Check if any optimized capability was found."""
        return bool(
            self.ordered_bulk_append or self.set_union or self.indexable_removal or self.native_predicate_remove
        )


def probe_capabilities(collection: Any) -> CollectionCapabilities:
    """
    Probe which capabilities a collection satisfies.

    Args:
        collection: Caller-owned collection to inspect (not modified)

    Returns:
        CollectionCapabilities describing available code paths

    Raises:
        InvalidArgumentError: If collection is None

    Example:
        >>> caps = probe_capabilities([1, 2, 3])
        >>> caps.add_strategy
        <AddStrategy.EXTEND: 'extend'>
        >>> caps.removal_strategy
        <RemovalStrategy.INDEXED: 'indexed'>
    """
    if collection is None:
        raise InvalidArgumentError("collection must not be None", {"argument": "collection"})

    return CollectionCapabilities(
        can_add=isinstance(collection, SupportsAdd),
        can_append=isinstance(collection, SupportsAppend),
        can_remove=isinstance(collection, SupportsRemove),
        ordered_bulk_append=isinstance(collection, OrderedBulkAppend),
        set_union=isinstance(collection, SetUnion),
        indexable_removal=isinstance(collection, IndexableRemoval),
        native_predicate_remove=isinstance(collection, NativePredicateRemove),
    )
