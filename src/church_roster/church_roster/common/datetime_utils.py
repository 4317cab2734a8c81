from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_PATTERN


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def is_iso_date_key(value: object) -> bool:
    """True when `value` is shaped like an attendance key (YYYY-MM-DD)."""
    return isinstance(value, str) and DATE_PATTERN.fullmatch(value) is not None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def today_string() -> str:
    return today_local().isoformat()
