"""Bulk collection exceptions.

Per IMPLEMENTATION_PHILOSOPHY: Clear, actionable error messages.
"""


class CollectionError(Exception):
    """Base exception for bulk collection operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (argument name, type, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InvalidArgumentError(CollectionError, ValueError):
    """Argument missing or unusable. Raised before any mutation."""


class CollectionModifiedError(CollectionError, RuntimeError):
    """Predicate changed the collection while it was being scanned."""
