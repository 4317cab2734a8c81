from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.church_roster.church_roster.database.bootstrap import apply_schema, list_tables
from src.church_roster.church_roster.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    apply_schema(conn)
    tables = list_tables(conn)
    cfg = conn.config
    print(f"OK: roster_kv ready -> {cfg.user}@{cfg.host}:{cfg.port}/{cfg.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
