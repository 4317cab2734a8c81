from __future__ import annotations

from enum import Enum


class Position(str, Enum):
    """직분: the fixed organizational roles, in display order."""

    PASTOR = "목사"
    ASSOCIATE_PASTOR = "부목사"
    PASTOR_WIFE = "사모"
    EVANGELIST = "전도사"
    ELDER = "장로"
    KWONSA = "권사"
    DEACON = "집사"
    SAINT = "성도"
    YOUTH = "청년"
    STUDENT = "학생"
    SUNDAY_SCHOOL = "주일학교"
    OTHER = "기타"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(p.value for p in cls)


class AttendanceStatus(str, Enum):
    """출결 상태. A missing date key means the day is still unset."""

    PRESENT = "출석"
    ABSENT = "결석"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(s.value for s in cls)


# Marker for "remove the entry" when setting attendance.
UNSET = "미정"

# "All" value of the position/status filters.
ALL_FILTER = "전체"
