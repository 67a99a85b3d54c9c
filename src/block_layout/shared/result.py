"""Result pattern for explicit error handling.

Lets the editing session report a failed commit to its caller without
raising through the presentation layer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed result."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raise the wrapped error.

        Exceptions are re-raised as-is so the caller sees the raised
        type; any other error value is wrapped in a ValueError.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Cannot unwrap Failure: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default


Result = Success[T] | Failure[E]


def ok(value: T) -> Success[T]:
    """Create a Success result."""
    return Success(value)


def err(error: E) -> Failure[E]:
    """Create a Failure result."""
    return Failure(error)
