from __future__ import annotations

import json
import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import is_iso_date_key, today_string
from ..core.constants import STORAGE_KEY
from ..core.enums import UNSET, AttendanceStatus
from ..core.exceptions import DomainError, PersistenceWriteError, ValidationError
from ..storage.repository import KeyValueStore
from .model import Member
from .sorting import sort_members

logger = logging.getLogger(__name__)


def migrate_legacy_records(records: list, *, today: str) -> list:
    """Convert the old single-`status` record shape to an attendance map.

    Applied when the first record still carries `status`: the status (if
    any) becomes today's entry and the `status` field is dropped.
    """
    if not records or not isinstance(records[0], dict) or "status" not in records[0]:
        return records

    migrated = []
    for record in records:
        new_record = {k: v for k, v in record.items() if k != "status"}
        new_record["attendance"] = {}
        if record.get("status"):
            new_record["attendance"][today] = record["status"]
        migrated.append(new_record)
    return migrated


class RosterStore:
    """Authoritative in-memory roster.

    Every effective mutation is followed by a save of the full roster to the
    key-value collaborator. Saving is best-effort: a PersistenceWriteError is
    logged and remembered, the in-memory change stays.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        *,
        storage_key: str = STORAGE_KEY,
        today: Callable[[], str] = today_string,
    ):
        self._storage = storage
        self._storage_key = storage_key
        self._today = today
        self._members: list[Member] = []
        self.last_saved_at: Optional[datetime] = None
        self.last_persist_error: Optional[PersistenceWriteError] = None

    # ---- read side ----

    @property
    def members(self) -> list[Member]:
        """Snapshot of the roster in display order."""
        return list(self._members)

    def get(self, member_id: int) -> Optional[Member]:
        for m in self._members:
            if m.id == member_id:
                return m
        return None

    def __len__(self) -> int:
        return len(self._members)

    def to_json(self, *, indent: Optional[int] = None) -> str:
        return json.dumps([m.to_dict() for m in self._members], ensure_ascii=False, indent=indent)

    # ---- load / save ----

    def load(self) -> "RosterStore":
        try:
            raw = self._storage.get_item(self._storage_key)
            if raw:
                records = migrate_legacy_records(json.loads(raw), today=self._today())
                self._members = sort_members(Member.from_dict(r) for r in records)
            else:
                self._members = []
        except (DomainError, ValueError, TypeError, KeyError, AttributeError):
            logger.exception("Could not load members from storage key %r", self._storage_key)
            self._members = []
        else:
            logger.info("Loaded %d members", len(self._members))
        return self

    def _persist(self) -> None:
        try:
            self._storage.set_item(self._storage_key, self.to_json())
        except PersistenceWriteError as e:
            logger.exception("Could not save members to storage key %r", self._storage_key)
            self.last_persist_error = e
        else:
            self.last_saved_at = datetime.now()
            self.last_persist_error = None

    def _index_of(self, member_id: int) -> Optional[int]:
        for i, m in enumerate(self._members):
            if m.id == member_id:
                return i
        return None

    # ---- mutations ----

    def next_id(self) -> int:
        return max((m.id for m in self._members), default=0) + 1

    def add(self, name: str, position: str, phone: str) -> Member:
        member = Member(id=self.next_id(), name=name, position=position, phone=phone, attendance={})
        self._members = sort_members([*self._members, member])
        self._persist()
        return member

    def edit(self, member_id: int, name: str, position: str, phone: str) -> bool:
        idx = self._index_of(member_id)
        if idx is None:
            return False
        updated = replace(self._members[idx], name=name, position=position, phone=phone)
        members = list(self._members)
        members[idx] = updated
        self._members = sort_members(members)
        self._persist()
        return True

    def delete(self, member_id: int) -> bool:
        """Remove a member. Callers holding a selection must drop the id too."""
        idx = self._index_of(member_id)
        if idx is None:
            return False
        self._members = self._members[:idx] + self._members[idx + 1 :]
        self._persist()
        return True

    def set_attendance(self, member_id: int, date_key: str, status: str) -> bool:
        """Set a status for a date, or remove the entry when `status` is UNSET.

        Returns False (and saves nothing) if the member is unknown or the
        attendance map would not change.
        """
        if not is_iso_date_key(date_key):
            raise ValidationError(f"날짜 형식이 올바르지 않습니다: {date_key}")
        if status != UNSET and status not in AttendanceStatus.values():
            raise ValidationError(f"출결 상태가 올바르지 않습니다: {status}")

        idx = self._index_of(member_id)
        if idx is None:
            return False

        member = self._members[idx]
        attendance = dict(member.attendance)
        if status == UNSET:
            if date_key not in attendance:
                return False
            del attendance[date_key]
        else:
            value = AttendanceStatus(status).value
            if attendance.get(date_key) == value:
                return False
            attendance[date_key] = value

        members = list(self._members)
        members[idx] = replace(member, attendance=attendance)
        self._members = members
        self._persist()
        return True

    def bulk_replace(self, members: Iterable[Member]) -> None:
        """Replace the whole roster. Unconditional and not recoverable.

        Only call with members that passed validate_members(); confirming
        with the operator is the caller's job.
        """
        self._members = sort_members(members)
        logger.warning("Roster replaced by import (%d members)", len(self._members))
        self._persist()
