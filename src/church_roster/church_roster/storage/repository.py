from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Persistence collaborator of the roster store.

    Lưu ý (DIP): RosterStore depends on this interface only, never on a
    concrete backend. Values are JSON text.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError
