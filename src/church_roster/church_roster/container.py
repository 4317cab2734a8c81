from __future__ import annotations

import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Optional

from .core.constants import STORAGE_KEY
from .core.exceptions import ValidationError
from .database.bootstrap import apply_schema
from .database.connection import DatabaseConnection, DBConfig
from .members.service import MemberService
from .members.store import RosterStore
from .messaging.service import MessagingIntent, NotificationService
from .storage.json_file_store import JsonFileKeyValueStore
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.repository import KeyValueStore
from .transfer.service import Clipboard, RosterTransferService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    storage: KeyValueStore
    store: RosterStore

    member_service: MemberService
    transfer_service: RosterTransferService
    notification_service: NotificationService


def build_storage(settings: ModuleType | Any) -> KeyValueStore:
    backend = str(getattr(settings, "STORAGE_BACKEND", "file")).lower()

    if backend == "memory":
        return InMemoryKeyValueStore()

    if backend == "file":
        return JsonFileKeyValueStore(getattr(settings, "DATA_FILE"))

    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(conn)
            logger.info("roster_kv table ready on %s", conn.config.database)
        return MySQLKeyValueStore(conn)

    raise ValidationError(f"Unknown STORAGE_BACKEND: {backend}")


def build_container(
    *,
    settings: ModuleType | Any = None,
    storage: Optional[KeyValueStore] = None,
    clipboard: Optional[Clipboard] = None,
    intent: Optional[MessagingIntent] = None,
) -> Container:
    if storage is None:
        storage = build_storage(settings)
    storage_key = str(getattr(settings, "STORAGE_KEY", STORAGE_KEY))

    store = RosterStore(storage, storage_key=storage_key).load()

    return Container(
        storage=storage,
        store=store,
        member_service=MemberService(store),
        transfer_service=RosterTransferService(store, clipboard=clipboard),
        notification_service=NotificationService(store, intent),
    )
