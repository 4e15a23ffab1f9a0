from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles carried by verified API tokens."""

    ADMIN = "ADMIN"
    USER = "USER"


class TransactionStatus(str, Enum):
    """Worker-loan transaction status as stored in the database."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class ValidationKind(str, Enum):
    MISSING_VALUE = "MissingValue"
    INVALID_VALUE = "InvalidValue"
    DATE_CONFLICT = "DateConflict"
