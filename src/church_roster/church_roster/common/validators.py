from __future__ import annotations

import re
from datetime import MAXYEAR, MINYEAR
from typing import Any

from ..core.enums import Position
from ..core.exceptions import ValidationError

_PHONE_RE = re.compile(r"[0-9+][0-9\- ]{2,}", re.ASCII)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name}을(를) 입력해주세요.")
    return value.strip()


def require_position(value: str) -> str:
    if value not in Position.values():
        raise ValidationError(f"직분 값이 유효하지 않습니다: {value}")
    return value


def require_phone(value: str) -> str:
    """Phone numbers are free-form, but must look like one (010-0000-0000)."""
    phone = require_non_empty(value, "전화번호")
    if not _PHONE_RE.fullmatch(phone):
        raise ValidationError(f"전화번호 형식이 올바르지 않습니다: {phone}")
    return phone


def require_int(value: Any, field_name: str) -> int:
    """Accept an int or a string of ASCII digits (JSON bodies and query strings)."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        return int(value.strip())
    raise ValidationError(f"{field_name} 값이 올바르지 않습니다: {value}")


def require_year(value: Any) -> int:
    year = require_int(value, "연도")
    if not MINYEAR <= year <= MAXYEAR:
        raise ValidationError(f"연도는 {MINYEAR}~{MAXYEAR} 사이여야 합니다: {year}")
    return year
