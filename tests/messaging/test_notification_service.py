from __future__ import annotations

from src.church_roster.church_roster.members.model import Member
from src.church_roster.church_roster.members.store import RosterStore
from src.church_roster.church_roster.messaging.service import NotificationService, build_recipients, sms_uri
from src.church_roster.church_roster.storage.memory_store import InMemoryKeyValueStore


class RecordingIntent:
    def __init__(self):
        self.opened: list[str] = []

    def open(self, uri):
        self.opened.append(uri)


def _members():
    return [
        Member(id=1, name="가", position="집사", phone="010-1111-2222"),
        Member(id=2, name="나", position="집사", phone="010 3333 4444"),
        Member(id=3, name="다", position="집사", phone="+82 (10) 5555-6666"),
    ]


def test_build_recipients_keeps_digits_in_roster_order():
    assert build_recipients(_members(), [3, 1]) == ["01011112222", "821055556666"]


def test_sms_uri():
    assert sms_uri(["01011112222", "01033334444"]) == "sms:01011112222,01033334444"


def test_send_bulk_opens_intent():
    store = RosterStore(InMemoryKeyValueStore()).load()
    store.bulk_replace(_members())
    intent = RecordingIntent()

    uri = NotificationService(store, intent).send_bulk({1, 2})

    assert uri == "sms:01011112222,01033334444"
    assert intent.opened == [uri]


def test_send_bulk_with_empty_selection_is_noop():
    store = RosterStore(InMemoryKeyValueStore()).load()
    store.bulk_replace(_members())
    intent = RecordingIntent()

    assert NotificationService(store, intent).send_bulk(set()) is None
    assert intent.opened == []
