from __future__ import annotations

import mysql.connector
import pytest

from src.church_roster.church_roster.core.exceptions import FileReadError, PersistenceWriteError
from src.church_roster.church_roster.storage.mysql_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, table: dict):
        self._table = table
        self._row = None

    def execute(self, sql, params):
        if sql.lstrip().startswith("SELECT"):
            (key,) = params
            self._row = {"item_value": self._table[key]} if key in self._table else None
        else:
            key, value = params
            self._table[key] = value

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table: dict):
        self._table = table
        self.committed = 0

    def cursor(self, dictionary=False):
        assert dictionary
        return FakeCursor(self._table)

    def commit(self):
        self.committed += 1

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self, *, down: bool = False):
        self.table: dict[str, str] = {}
        self.down = down

    def connect(self):
        if self.down:
            raise mysql.connector.Error("Can't connect to MySQL server")
        return FakeConnection(self.table)


def test_upsert_and_read_back():
    factory = FakeConnectionFactory()
    store = MySQLKeyValueStore(factory)

    assert store.get_item("members") is None
    store.set_item("members", "[]")
    store.set_item("members", '[{"id": 1}]')

    assert store.get_item("members") == '[{"id": 1}]'
    assert factory.table == {"members": '[{"id": 1}]'}


def test_errors_are_mapped_to_domain_errors():
    store = MySQLKeyValueStore(FakeConnectionFactory(down=True))

    with pytest.raises(PersistenceWriteError):
        store.set_item("members", "[]")
    with pytest.raises(FileReadError):
        store.get_item("members")
