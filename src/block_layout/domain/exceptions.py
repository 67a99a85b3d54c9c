"""Domain layer exceptions.

All domain-specific exceptions inherit from DomainError.
"""
from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class EntityNotFoundError(DomainError):
    def __init__(self, entity_type: str, entity_id: int | str, details: dict[str, Any] | None = None) -> None:
        message = f"{entity_type} not found: {entity_id}"
        super().__init__(message, details)
        self.entity_type = entity_type
        self.entity_id = entity_id


class ValidationError(DomainError):
    def __init__(self, field: str, message: str, value: Any = None) -> None:
        full_message = f"Validation error for '{field}': {message}"
        details = {"field": field, "value": value}
        super().__init__(full_message, details)
        self.field = field
        self.value = value


class InvariantViolationError(DomainError):
    """A mutation was rejected because it would break a layout invariant."""

    def __init__(self, invariant: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, {"invariant": invariant, **(details or {})})
        self.invariant = invariant


class LastBlockRemovalError(InvariantViolationError):
    def __init__(self, block_id: int) -> None:
        super().__init__(
            "at_least_one_block",
            f"Cannot remove block {block_id}: a layout needs at least one block",
            {"block_id": block_id},
        )
        self.block_id = block_id


class PersistenceFailureError(DomainError):
    """The save collaborator rejected a commit."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Failed to save layout: {reason}", details)
        self.reason = reason
