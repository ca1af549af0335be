from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str], field_name: str, *, default: Optional[date] = None) -> Optional[date]:
    v = str(value or "").strip()
    if not v:
        return default
    try:
        return parse_iso_date(v)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def format_iso_date(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value else None


def date_stamp(value: date) -> str:
    """Compact YYYYMMDD stamp used in export filenames."""
    return value.strftime("%Y%m%d")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it; the policy engine never calls it.
    """
    return datetime.now().date()


def now_local() -> datetime:
    return datetime.now()
