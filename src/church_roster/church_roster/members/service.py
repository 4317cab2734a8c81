from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_empty, require_phone, require_position
from ..core.enums import UNSET
from ..core.exceptions import MemberNotFoundError
from .model import Member
from .selection import SelectionSet
from .store import RosterStore


class MemberService:
    """Use case: manage members and mark attendance.

    Trims and checks form input before it reaches the store, which assumes
    clean values.
    """

    def __init__(self, store: RosterStore):
        self._store = store

    def list_members(self) -> list[Member]:
        return self._store.members

    def get(self, member_id: int) -> Member:
        member = self._store.get(int(member_id))
        if not member:
            raise MemberNotFoundError(member_id)
        return member

    def add_member(self, *, name: str, position: str, phone: str) -> Member:
        return self._store.add(
            require_non_empty(name, "이름"),
            require_position(position),
            require_phone(phone),
        )

    def edit_member(self, member_id: int, *, name: str, position: str, phone: str) -> Member:
        self.get(member_id)
        self._store.edit(
            int(member_id),
            require_non_empty(name, "이름"),
            require_position(position),
            require_phone(phone),
        )
        return self.get(member_id)

    def delete_member(self, member_id: int, *, selection: Optional[SelectionSet] = None) -> None:
        self.get(member_id)
        self._store.delete(int(member_id))
        if selection is not None:
            selection.discard(int(member_id))

    def mark_attendance(self, member_id: int, *, date_key: str, status: str) -> Member:
        self.get(member_id)
        self._store.set_attendance(int(member_id), date_key, status)
        return self.get(member_id)

    def toggle_attendance(self, member_id: int, *, date_key: str, status: str) -> Member:
        """Roster button behavior: pressing the current status clears it."""
        member = self.get(member_id)
        new_status = UNSET if member.attendance.get(date_key) == status else status
        return self.mark_attendance(member_id, date_key=date_key, status=new_status)
