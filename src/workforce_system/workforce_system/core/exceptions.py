from __future__ import annotations

from datetime import date
from typing import Optional

from .enums import ValidationKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = "DomainError"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, *, kind: ValidationKind = ValidationKind.INVALID_VALUE):
        super().__init__(message)
        self.validation_kind = kind

    @property
    def kind(self) -> str:  # type: ignore[override]
        return self.validation_kind.value


class MissingValueError(ValidationError):
    """A required value (entity, id, date) was not supplied."""

    def __init__(self, field_name: str):
        super().__init__(f"This value is null: {field_name}", kind=ValidationKind.MISSING_VALUE)
        self.field_name = field_name


class DateConflictError(ValidationError):
    """A candidate loan period collides with an existing one for the same employee."""

    def __init__(
        self,
        *,
        start_date: date,
        end_date: date,
        existing_start_date: Optional[date] = None,
        existing_end_date: Optional[date] = None,
    ):
        super().__init__(
            f"Date between {start_date} and {end_date} is not available.",
            kind=ValidationKind.DATE_CONFLICT,
        )
        self.start_date = start_date
        self.end_date = end_date
        self.existing_start_date = existing_start_date
        self.existing_end_date = existing_end_date


class ConflictError(DomainError):
    """Raised when a write collides with existing state."""

    kind = "Conflict"


class DuplicateKeyError(ConflictError):
    kind = "DuplicateKey"

    def __init__(self, entity: str, key: object):
        super().__init__(f"This {entity}'s id exists: {key}")
        self.entity = entity
        self.key = key


class NotFoundError(DomainError):
    kind = "NotFound"

    def __init__(self, entity: str, key: object):
        super().__init__(f"Could not find {entity} with id: {key}")
        self.entity = entity
        self.key = key


class AuthenticationError(DomainError):
    """Raised when a bearer token is missing or cannot be verified."""

    kind = "Unauthenticated"


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""

    kind = "Forbidden"
