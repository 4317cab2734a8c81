from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import is_iso_date_key, parse_iso_date
from ..common.validators import require_year
from ..core.enums import ALL_FILTER, AttendanceStatus, Position
from ..core.exceptions import ValidationError


def _require_date(value: str) -> date:
    try:
        if is_iso_date_key(value):
            return parse_iso_date(value)
    except ValueError:
        pass
    raise ValidationError(f"날짜 형식이 올바르지 않습니다: {value}")


@dataclass(frozen=True)
class FilterState:
    """What the roster screen is currently showing.

    Any combination of values is valid. Changing position, status or the
    viewing date sends the operator back to page 1.
    """

    position: str
    status: str
    viewing_date: str
    year: int
    page: int = 1

    @classmethod
    def defaults(cls, today: date) -> "FilterState":
        return cls(
            position=ALL_FILTER,
            status=ALL_FILTER,
            viewing_date=today.isoformat(),
            year=today.year,
            page=1,
        )

    @classmethod
    def from_dict(cls, data: Optional[dict], *, today: date) -> "FilterState":
        if not data:
            return cls.defaults(today)
        base = cls.defaults(today)
        return cls(
            position=str(data.get("position", base.position)),
            status=str(data.get("status", base.status)),
            viewing_date=str(data.get("viewing_date", base.viewing_date)),
            year=int(data.get("year", base.year)),
            page=int(data.get("page", base.page)),
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def update(
        self,
        *,
        position: Optional[str] = None,
        status: Optional[str] = None,
        viewing_date: Optional[str] = None,
        year: Optional[int] = None,
        page: Optional[int] = None,
    ) -> "FilterState":
        if position is not None and position != ALL_FILTER and position not in Position.values():
            raise ValidationError(f"직분 필터가 올바르지 않습니다: {position}")
        if status is not None and status != ALL_FILTER and status not in AttendanceStatus.values():
            raise ValidationError(f"출결 필터가 올바르지 않습니다: {status}")
        if viewing_date is not None:
            _require_date(viewing_date)

        new = replace(
            self,
            position=self.position if position is None else position,
            status=self.status if status is None else status,
            viewing_date=self.viewing_date if viewing_date is None else viewing_date,
            year=self.year if year is None else require_year(year),
        )
        if (new.position, new.status, new.viewing_date) != (self.position, self.status, self.viewing_date):
            new = replace(new, page=1)
        if page is not None:
            new = replace(new, page=int(page))
        return new

    def select_date(self, viewing_date: str) -> "FilterState":
        """Pick a Sunday on the calendar; the calendar follows the date's year."""
        state = self.update(viewing_date=viewing_date)
        return replace(state, year=_require_date(viewing_date).year)

    def clamp_page(self, pages: int) -> "FilterState":
        page = min(max(self.page, 1), max(pages, 1))
        return self if page == self.page else replace(self, page=page)

    def reset(self, today: date) -> "FilterState":
        return FilterState.defaults(today)
