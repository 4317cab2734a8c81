from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

import mysql.connector

from ..core.exceptions import FileReadError, PersistenceWriteError
from ..database.bootstrap import KV_TABLE
from ..database.connection import DatabaseConnection


class MySQLKeyValueStore:
    """Key-value store backed by the `roster_kv` table (one row per key)."""

    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @contextmanager
    def _cursor(self) -> Iterator:
        conn = self._conn.connect()
        try:
            cur = conn.cursor(dictionary=True)
            try:
                yield cur
                conn.commit()
            finally:
                cur.close()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_item(self, key: str) -> Optional[str]:
        try:
            with self._cursor() as cur:
                cur.execute(f"SELECT item_value FROM `{KV_TABLE}` WHERE item_key=%s", (key,))
                row = cur.fetchone()
        except mysql.connector.Error as e:
            raise FileReadError(f"데이터베이스에서 읽을 수 없습니다: {e}") from e
        return str(row["item_value"]) if row else None

    def set_item(self, key: str, value: str) -> None:
        try:
            with self._cursor() as cur:
                cur.execute(
                    f"""
                    INSERT INTO `{KV_TABLE}` (item_key, item_value)
                    VALUES (%s, %s)
                    ON DUPLICATE KEY UPDATE item_value=VALUES(item_value)
                    """,
                    (key, value),
                )
        except mysql.connector.Error as e:
            raise PersistenceWriteError(f"데이터베이스에 저장할 수 없습니다: {e}") from e
