from __future__ import annotations

import math

import pytest

from src.church_roster.church_roster.core.enums import ALL_FILTER
from src.church_roster.church_roster.core.exceptions import ValidationError
from src.church_roster.church_roster.members.model import Member
from src.church_roster.church_roster.views.projector import (
    AttendanceCounts,
    attendance_rate,
    counts_for_scope,
    filter_roster,
    member_stats,
    paginate,
    total_pages,
)

DAY = "2024-03-03"


def _roster() -> list[Member]:
    return [
        Member(id=1, name="가", position="집사", phone="010", attendance={DAY: "출석"}),
        Member(id=2, name="나", position="집사", phone="010", attendance={DAY: "결석"}),
        Member(id=3, name="다", position="청년", phone="010", attendance={}),
        Member(id=4, name="라", position="청년", phone="010", attendance={DAY: "출석", "2024-03-10": "결석"}),
    ]


def test_filter_all_returns_everyone_in_order():
    assert [m.id for m in filter_roster(_roster(), ALL_FILTER, ALL_FILTER, DAY)] == [1, 2, 3, 4]


def test_filter_by_position_and_status():
    roster = _roster()
    assert [m.id for m in filter_roster(roster, "청년", ALL_FILTER, DAY)] == [3, 4]
    assert [m.id for m in filter_roster(roster, ALL_FILTER, "출석", DAY)] == [1, 4]
    assert [m.id for m in filter_roster(roster, "집사", "결석", DAY)] == [2]


def test_unset_day_matches_no_status():
    roster = _roster()
    ids = {m.id for m in filter_roster(roster, ALL_FILTER, "출석", DAY)} | {
        m.id for m in filter_roster(roster, ALL_FILTER, "결석", DAY)
    }
    assert 3 not in ids


def test_filter_uses_viewing_date():
    assert [m.id for m in filter_roster(_roster(), ALL_FILTER, "결석", "2024-03-10")] == [4]


def test_counts_ignore_status_filter_scope():
    assert counts_for_scope(_roster(), ALL_FILTER, DAY) == AttendanceCounts(total=4, present=2, absent=1)
    assert counts_for_scope(_roster(), "청년", DAY) == AttendanceCounts(total=2, present=1, absent=0)


@pytest.mark.parametrize("day", [DAY, "2024-03-10", "2025-01-01"])
def test_counts_never_exceed_total(day):
    counts = counts_for_scope(_roster(), ALL_FILTER, day)
    assert counts.present + counts.absent <= counts.total


def test_counts_equal_total_when_everyone_marked():
    roster = [m for m in _roster() if DAY in m.attendance]
    counts = counts_for_scope(roster, ALL_FILTER, DAY)
    assert counts.present + counts.absent == counts.total


@pytest.mark.parametrize("size", [1, 2, 3, 15])
def test_paginate_bounds(size):
    items = list(range(7))
    pages = total_pages(len(items), size)
    assert pages == math.ceil(7 / size)

    seen = []
    for page in range(1, pages + 1):
        chunk = paginate(items, page, size)
        assert 0 < len(chunk) <= size
        seen.extend(chunk)
    assert seen == items
    assert paginate(items, pages + 1, size) == []


def test_paginate_default_page_size_is_fifteen():
    items = list(range(40))
    assert paginate(items, 1) == items[:15]
    assert paginate(items, 3) == items[30:]
    assert total_pages(40) == 3


def test_paginate_page_below_one_is_empty():
    assert paginate([1, 2, 3], 0, 2) == []


def test_page_size_must_be_positive():
    with pytest.raises(ValidationError):
        paginate([1], 1, 0)


def test_member_stats_month_and_year():
    member = Member(
        id=1,
        name="Kim",
        position="집사",
        phone="010",
        attendance={
            "2024-01-07": "출석",
            "2024-01-14": "결석",
            "2024-01-21": "출석",
            "2024-02-04": "출석",
            "2023-12-31": "출석",
        },
    )

    stats = member_stats(member, 2024, 1)

    assert (stats.present_month, stats.total_month, stats.month_rate) == (2, 3, 67)
    assert (stats.present_year, stats.total_year, stats.year_rate) == (3, 4, 75)


def test_member_stats_without_entries_is_zero():
    stats = member_stats(Member(id=1, name="Kim", position="집사", phone="010"), 2024, 5)
    assert (stats.total_month, stats.month_rate, stats.total_year, stats.year_rate) == (0, 0, 0, 0)


@pytest.mark.parametrize(
    "present,total,expected",
    [(1, 8, 13), (1, 200, 1), (1, 3, 33), (2, 3, 67), (3, 8, 38), (0, 0, 0), (5, 5, 100)],
)
def test_attendance_rate_rounds_half_up(present, total, expected):
    assert attendance_rate(present, total) == expected
