from __future__ import annotations

import copy
import json

import pytest

from src.church_roster.church_roster.core.exceptions import (
    DuplicateIdError,
    ElementNotObjectError,
    EmptyInputError,
    ImportDataError,
    InvalidAttendanceEntryError,
    InvalidPositionError,
    MissingAttendanceError,
    MissingIdError,
    MissingNameError,
    MissingPhoneError,
    NotAnArrayError,
)
from src.church_roster.church_roster.members.model import Member
from src.church_roster.church_roster.members.validator import validate_members


def _record(**overrides):
    base = {
        "id": 1,
        "name": "Kim",
        "position": "집사",
        "phone": "010-1111-2222",
        "attendance": {},
    }
    base.update(overrides)
    return base


def test_valid_roster_round_trips_through_json():
    members = [
        Member(id=1, name="김철수", position="장로", phone="010-1234-5678", attendance={"2024-01-07": "출석"}),
        Member(id=2, name="이영희", position="청년", phone="010-2222-3333", attendance={"2024-01-07": "결석", "2024-01-14": "출석"}),
        Member(id=3, name="박민수", position="기타", phone="", attendance={}),
    ]
    raw = json.loads(json.dumps([m.to_dict() for m in members], ensure_ascii=False))

    assert validate_members(raw) == members


def test_empty_list_is_valid():
    assert validate_members([]) == []


def test_none_is_empty_input():
    with pytest.raises(EmptyInputError):
        validate_members(None)


@pytest.mark.parametrize("raw", [{"not": "an array"}, "text", 3, True])
def test_non_list_is_rejected(raw):
    with pytest.raises(NotAnArrayError) as exc:
        validate_members(raw)
    assert "배열" in str(exc.value)


@pytest.mark.parametrize("item", [None, "x", 5, ["id", 1]])
def test_element_must_be_an_object(item):
    with pytest.raises(ElementNotObjectError) as exc:
        validate_members([_record(), item])
    assert exc.value.index == 2
    assert str(exc.value).startswith("2번째")


@pytest.mark.parametrize("bad_id", [None, "1", True])
def test_id_must_be_numeric(bad_id):
    with pytest.raises(MissingIdError) as exc:
        validate_members([_record(id=bad_id)])
    assert exc.value.index == 1


def test_float_id_is_accepted_as_is():
    [member] = validate_members([_record(id=7.0)])
    assert member.id == 7.0


def test_missing_id_key():
    rec = _record()
    del rec["id"]
    with pytest.raises(MissingIdError):
        validate_members([rec])


def test_name_must_be_text():
    with pytest.raises(MissingNameError):
        validate_members([_record(name=42)])


def test_unknown_position_reports_index_and_value():
    raw = [{"id": 1, "name": "Lee", "position": "알수없음", "phone": "010", "attendance": {}}]

    with pytest.raises(InvalidPositionError) as exc:
        validate_members(raw)

    assert exc.value.index == 1
    assert exc.value.value == "알수없음"
    assert "알수없음" in str(exc.value)


def test_position_must_be_text():
    with pytest.raises(InvalidPositionError) as exc:
        validate_members([_record(), _record(id=2, position=None)])
    assert exc.value.index == 2


def test_phone_must_be_text():
    with pytest.raises(MissingPhoneError):
        validate_members([_record(phone=1012345678)])


@pytest.mark.parametrize("attendance", [None, [], "출석"])
def test_attendance_must_be_an_object(attendance):
    with pytest.raises(MissingAttendanceError):
        validate_members([_record(attendance=attendance)])


@pytest.mark.parametrize(
    "date_key,value",
    [
        ("2024-1-7", "출석"),
        ("20240107", "출석"),
        ("2024-01-07\n", "출석"),
        ("２０２４-01-07", "출석"),
        ("2024-01-07", "지각"),
        ("2024-01-07", None),
    ],
)
def test_attendance_entries_are_checked(date_key, value):
    with pytest.raises(InvalidAttendanceEntryError) as exc:
        validate_members([_record(attendance={"2024-01-14": "출석", date_key: value})])
    assert exc.value.name == "Kim"
    assert exc.value.date == date_key


def test_first_failure_wins():
    raw = [_record(id="x", name=None, position="??")]
    with pytest.raises(MissingIdError):
        validate_members(raw)


def test_all_failures_share_a_base_class():
    with pytest.raises(ImportDataError):
        validate_members([_record(position="??")])


def test_input_is_not_mutated():
    raw = [_record(attendance={"2024-01-07": "출석"}), _record(id=2, name="Lee")]
    snapshot = copy.deepcopy(raw)

    validate_members(raw)

    assert raw == snapshot


def test_duplicate_ids_are_rejected():
    raw = [_record(id=1), _record(id=2, name="Lee"), _record(id=1, name="Park")]

    with pytest.raises(DuplicateIdError) as exc:
        validate_members(raw)

    assert exc.value.index == 3
    assert exc.value.member_id == 1
    assert str(exc.value).startswith("3번째")


def test_int_and_float_ids_collide():
    with pytest.raises(DuplicateIdError):
        validate_members([_record(id=7), _record(id=7.0, name="Lee")])
