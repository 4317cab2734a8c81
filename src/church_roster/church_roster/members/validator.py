from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..common.datetime_utils import is_iso_date_key
from ..core.enums import AttendanceStatus, Position
from ..core.exceptions import (
    DuplicateIdError,
    ElementNotObjectError,
    EmptyInputError,
    InvalidAttendanceEntryError,
    InvalidPositionError,
    MissingAttendanceError,
    MissingIdError,
    MissingNameError,
    MissingPhoneError,
    NotAnArrayError,
)
from .model import Member


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid id.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_element(index: int, item: Any) -> Member:
    if not isinstance(item, Mapping):
        raise ElementNotObjectError(index)

    if not _is_number(item.get("id")):
        raise MissingIdError(index)
    if not isinstance(item.get("name"), str):
        raise MissingNameError(index)

    position = item.get("position")
    if not isinstance(position, str) or position not in Position.values():
        raise InvalidPositionError(index, position)

    if not isinstance(item.get("phone"), str):
        raise MissingPhoneError(index)

    attendance = item.get("attendance")
    if not isinstance(attendance, Mapping):
        raise MissingAttendanceError(index)

    statuses = AttendanceStatus.values()
    for date_key, status in attendance.items():
        if not is_iso_date_key(date_key) or status not in statuses:
            raise InvalidAttendanceEntryError(item["name"], date_key, status)

    return Member(
        id=item["id"],
        name=item["name"],
        position=position,
        phone=item["phone"],
        attendance=dict(attendance),
    )


def validate_members(raw: Any) -> list[Member]:
    """Check a decoded JSON value against the roster shape.

    Checks run in order and the first failure is raised (an ImportDataError
    subclass); element indexes in messages are 1-based. Ids must be unique
    (7 and 7.0 count as the same id). Values are passed through without
    coercion and `raw` is never modified.
    """
    if raw is None:
        raise EmptyInputError()
    if not isinstance(raw, list):
        raise NotAnArrayError()

    members: list[Member] = []
    seen_ids = set()
    for i, item in enumerate(raw):
        member = _check_element(i + 1, item)
        if member.id in seen_ids:
            raise DuplicateIdError(i + 1, member.id)
        seen_ids.add(member.id)
        members.append(member)
    return members
