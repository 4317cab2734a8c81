from __future__ import annotations

from .connection import DatabaseConnection

KV_TABLE = "roster_kv"

SCHEMA_SQL = f"""
CREATE TABLE IF NOT EXISTS `{KV_TABLE}` (
    item_key VARCHAR(191) NOT NULL PRIMARY KEY,
    item_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
"""


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    database = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create the database and the key-value table (idempotent)."""
    ensure_database_exists(conn_factory)

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute(SCHEMA_SQL)
        conn.commit()
    finally:
        conn.close()


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [str(r[0]) for r in cur.fetchall()]
    finally:
        conn.close()
