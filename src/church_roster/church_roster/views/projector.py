from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence, TypeVar

from ..core.constants import ITEMS_PER_PAGE
from ..core.enums import ALL_FILTER, AttendanceStatus
from ..core.exceptions import ValidationError
from ..members.model import Member

T = TypeVar("T")


@dataclass(frozen=True)
class AttendanceCounts:
    total: int
    present: int
    absent: int


@dataclass(frozen=True)
class MemberStats:
    """Read-model for the member detail view (month is 1-based)."""

    present_month: int
    total_month: int
    month_rate: int
    present_year: int
    total_year: int
    year_rate: int


def _matches_position(member: Member, position_filter: str) -> bool:
    return position_filter == ALL_FILTER or member.position == position_filter


def filter_roster(
    members: Sequence[Member],
    position_filter: str,
    status_filter: str,
    viewing_date: str,
) -> list[Member]:
    """Members matching both filters, in roster order.

    An unset day matches neither 출석 nor 결석.
    """
    return [
        m
        for m in members
        if _matches_position(m, position_filter)
        and (status_filter == ALL_FILTER or m.attendance.get(viewing_date) == status_filter)
    ]


def paginate(items: Sequence[T], page: int, page_size: int = ITEMS_PER_PAGE) -> list[T]:
    if page_size < 1:
        raise ValidationError("페이지 크기는 1 이상이어야 합니다.")
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def total_pages(count: int, page_size: int = ITEMS_PER_PAGE) -> int:
    if page_size < 1:
        raise ValidationError("페이지 크기는 1 이상이어야 합니다.")
    return math.ceil(count / page_size)


def counts_for_scope(members: Sequence[Member], position_filter: str, viewing_date: str) -> AttendanceCounts:
    """Counters for the header badges. The status filter is ignored here."""
    scope = [m for m in members if _matches_position(m, position_filter)]
    present = sum(1 for m in scope if m.attendance.get(viewing_date) == AttendanceStatus.PRESENT.value)
    absent = sum(1 for m in scope if m.attendance.get(viewing_date) == AttendanceStatus.ABSENT.value)
    return AttendanceCounts(total=len(scope), present=present, absent=absent)


def attendance_rate(present: int, total: int) -> int:
    """Integer percentage, rounded half-up; 0 when there is nothing recorded."""
    if total <= 0:
        return 0
    pct = Decimal(present) * 100 / Decimal(total)
    return int(pct.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def member_stats(member: Member, year: int, month: int) -> MemberStats:
    year_prefix = f"{int(year):04d}-"
    month_part = f"{int(month):02d}"

    year_entries = [(d, s) for d, s in member.attendance.items() if d.startswith(year_prefix)]
    month_entries = [(d, s) for d, s in year_entries if d[5:7] == month_part]

    present = AttendanceStatus.PRESENT.value
    present_year = sum(1 for _, s in year_entries if s == present)
    present_month = sum(1 for _, s in month_entries if s == present)

    return MemberStats(
        present_month=present_month,
        total_month=len(month_entries),
        month_rate=attendance_rate(present_month, len(month_entries)),
        present_year=present_year,
        total_year=len(year_entries),
        year_rate=attendance_rate(present_year, len(year_entries)),
    )
