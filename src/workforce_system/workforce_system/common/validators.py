from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.exceptions import MissingValueError, ValidationError


def require_present(value: Any, field_name: str) -> Any:
    if value is None:
        raise MissingValueError(field_name)
    return value


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None:
        raise MissingValueError(field_name)
    if not str(value).strip():
        raise ValidationError(f"{field_name} should not be blank")
    return str(value).strip()


def require_length(value: str, field_name: str, *, min_len: int = 0, max_len: Optional[int] = None) -> str:
    if len(value) < min_len or (max_len is not None and len(value) > max_len):
        if max_len is None:
            raise ValidationError(f"{field_name} should be at least {min_len} characters long")
        if min_len == max_len:
            raise ValidationError(f"{field_name} should be {min_len} characters long")
        raise ValidationError(f"{field_name} should be {min_len} to {max_len} characters long")
    return value


def require_decimal(value: Any, field_name: str, *, min_value: Optional[Decimal] = None) -> Decimal:
    if value is None:
        raise MissingValueError(field_name)
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not number.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if min_value is not None and number < min_value:
        raise ValidationError(f"{field_name} must be at least {min_value}")
    return number


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y"}
    return bool(value)
