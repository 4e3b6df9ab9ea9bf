"""bulk-collections - Bulk add and remove operations for mutable collections.

Public API exports.

Per KERNEL_PHILOSOPHY: This is library mechanism, callers own the collections.
"""

from .capabilities import AddStrategy
from .capabilities import CollectionCapabilities
from .capabilities import RemovalStrategy
from .capabilities import probe_capabilities
from .exceptions import CollectionError
from .exceptions import CollectionModifiedError
from .exceptions import InvalidArgumentError
from .operations import add_many
from .operations import remove_many
from .operations import remove_where
from .operations import remove_where_indexed
from .protocols import IndexableRemoval
from .protocols import NativePredicateRemove
from .protocols import OrderedBulkAppend
from .protocols import SetUnion
from .protocols import SupportsAdd
from .protocols import SupportsAppend
from .protocols import SupportsRemove

__all__ = [
    # Operations
    "add_many",
    "remove_many",
    "remove_where",
    "remove_where_indexed",
    # Capabilities
    "CollectionCapabilities",
    "AddStrategy",
    "RemovalStrategy",
    "probe_capabilities",
    # Protocols
    "SupportsAdd",
    "SupportsAppend",
    "SupportsRemove",
    "OrderedBulkAppend",
    "SetUnion",
    "IndexableRemoval",
    "NativePredicateRemove",
    # Exceptions
    "CollectionError",
    "CollectionModifiedError",
    "InvalidArgumentError",
]

__version__ = "0.1.0"
