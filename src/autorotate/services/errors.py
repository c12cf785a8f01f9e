"""Exceptions raised by the catalog, settings and access services.

Every error aborts the operation that raised it before anything is written,
so callers never observe partially applied mutations.
"""

from __future__ import annotations


class RotationError(RuntimeError):
    """Base exception for rejected catalog, settings and registry operations."""

    message = "operation rejected"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class OutOfBoundsError(RotationError):
    """Raised when a catalog index is not below the current catalog size."""

    message = "index out-of-bounds"

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__()


class EmptyCatalogError(RotationError):
    """Raised when a rotation query runs against an empty catalog."""

    message = "catalog is empty"


class ZeroDurationError(RotationError):
    """Raised when a tick duration of zero is written."""

    message = "zero tick duration"


class NotAdministratorError(RotationError):
    """Raised when a non-administrator attempts an administrator-only mutation."""

    message = "caller is not the administrator"


class NotApprovedOrOwnerError(RotationError):
    """Raised when the caller neither owns nor is approved on the entity."""

    message = "entity is not approved or owned"


class EntityNotFoundError(RotationError):
    """Raised when a registry mutation targets an entity that was never minted."""

    message = "entity does not exist"

    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__()
