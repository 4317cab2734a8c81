from __future__ import annotations

import pytest

from src.church_roster.church_roster.core.exceptions import MemberNotFoundError, ValidationError
from src.church_roster.church_roster.members.selection import SelectionSet
from src.church_roster.church_roster.members.service import MemberService
from src.church_roster.church_roster.members.store import RosterStore
from src.church_roster.church_roster.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture()
def service():
    store = RosterStore(InMemoryKeyValueStore()).load()
    return MemberService(store)


def test_add_member_trims_input(service):
    member = service.add_member(name="  김철수 ", position="장로", phone=" 010-1234-5678 ")
    assert (member.name, member.phone) == ("김철수", "010-1234-5678")


@pytest.mark.parametrize(
    "name,position,phone",
    [
        ("", "성도", "010-1234-5678"),
        ("   ", "성도", "010-1234-5678"),
        ("Kim", "교주", "010-1234-5678"),
        ("Kim", "성도", ""),
        ("Kim", "성도", "phone"),
    ],
)
def test_add_member_rejects_bad_input(service, name, position, phone):
    with pytest.raises(ValidationError):
        service.add_member(name=name, position=position, phone=phone)
    assert service.list_members() == []


def test_edit_unknown_member(service):
    with pytest.raises(MemberNotFoundError):
        service.edit_member(3, name="Kim", position="성도", phone="010-1234-5678")


def test_delete_drops_member_from_selection(service):
    kim = service.add_member(name="Kim", position="성도", phone="010-1234-5678")
    lee = service.add_member(name="Lee", position="성도", phone="010-2222-3333")
    selection = SelectionSet([kim.id, lee.id])

    service.delete_member(kim.id, selection=selection)

    assert selection.to_list() == [lee.id]
    assert [m.id for m in service.list_members()] == [lee.id]


def test_toggle_attendance_clears_same_status(service):
    kim = service.add_member(name="Kim", position="성도", phone="010-1234-5678")

    assert service.toggle_attendance(kim.id, date_key="2024-03-03", status="출석").attendance == {"2024-03-03": "출석"}
    assert service.toggle_attendance(kim.id, date_key="2024-03-03", status="결석").attendance == {"2024-03-03": "결석"}
    assert service.toggle_attendance(kim.id, date_key="2024-03-03", status="결석").attendance == {}


def test_selection_toggle_page():
    selection = SelectionSet([9])

    selection.toggle_page([1, 2])
    assert selection.to_list() == [1, 2, 9]
    assert selection.all_selected([1, 2])

    selection.toggle_page([1, 2])
    assert selection.to_list() == [9]


def test_selection_empty_page_is_never_all_selected():
    selection = SelectionSet([1])
    assert not selection.all_selected([])
    selection.toggle_page([])
    assert selection.to_list() == [1]


def test_selection_toggle_and_clear():
    selection = SelectionSet()
    assert selection.toggle(4) is True
    assert 4 in selection
    assert selection.toggle(4) is False
    selection.toggle(5)
    selection.clear()
    assert len(selection) == 0
