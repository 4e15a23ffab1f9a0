from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import MissingValueError, ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value: Optional[str], field_name: str) -> date:
    if value is None or not str(value).strip():
        raise MissingValueError(field_name)
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD): {value!r}")


def format_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
