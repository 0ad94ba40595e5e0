from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .enums import ErrorKind


@dataclass(frozen=True)
class FieldError:
    """One failed field check: which field, what kind, and a readable message."""

    field: str
    kind: ErrorKind
    message: str
    value: Any = None

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "kind": self.kind.value,
            "message": self.message,
            "value": None if self.value is None else str(self.value),
        }


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, errors: Optional[Sequence[FieldError]] = None):
        super().__init__(message)
        self.errors: list[FieldError] = list(errors or [])

    @classmethod
    def from_errors(cls, errors: Sequence[FieldError]) -> "ValidationError":
        message = errors[0].message if len(errors) == 1 else "Validation failed"
        return cls(message, errors)

    def has_kind(self, kind: ErrorKind) -> bool:
        return any(e.kind == kind for e in self.errors)


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class RegistrationClosedError(AuthorizationError):
    """Raised when an administrator already exists."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""
