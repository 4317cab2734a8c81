from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional


@dataclass(frozen=True)
class MonthSundays:
    month: int
    sundays: list[date]


def yearly_sundays(year: int) -> list[MonthSundays]:
    """Every Sunday of `year`, grouped by (1-based) month."""
    months = [MonthSundays(month=m, sundays=[]) for m in range(1, 13)]
    first = date(year, 1, 1)
    first += timedelta(days=(6 - first.weekday()) % 7)
    # stepping past Dec 31 would overflow in year 9999
    for offset in range(0, (date(year, 12, 31) - first).days + 1, 7):
        day = first + timedelta(days=offset)
        months[day.month - 1].sundays.append(day)
    return months


def current_week_sunday(today: date) -> date:
    """The Sunday that starts the week containing `today`."""
    return today - timedelta(days=(today.weekday() + 1) % 7)


def calendar_view(year: int, selected_date: str, today: date) -> list[dict]:
    """Yearly Sunday buttons with the flags the calendar needs to highlight."""
    current_sunday = current_week_sunday(today)
    out = []
    for block in yearly_sundays(year):
        out.append(
            {
                "month": block.month,
                "label": f"{block.month}월",
                "current_month": year == today.year and block.month == today.month,
                "weeks": [
                    {
                        "date": d.isoformat(),
                        "day": d.day,
                        "active": d.isoformat() == selected_date,
                        "current_week": d == current_sunday,
                        "today": d == today,
                    }
                    for d in block.sundays
                ],
            }
        )
    return out


def month_grid(year: int, month: int) -> list[Optional[date]]:
    """Days of a month with leading blanks (None) up to the first weekday.

    Trailing blanks are not added; the grid ends on the last day.
    """
    first_weekday, days_in_month = calendar.monthrange(year, month)
    leading = (first_weekday + 1) % 7
    days: list[Optional[date]] = [None] * leading
    days.extend(date(year, month, d) for d in range(1, days_in_month + 1))
    return days
