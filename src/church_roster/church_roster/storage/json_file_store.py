from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.exceptions import FileReadError, PersistenceWriteError


class JsonFileKeyValueStore:
    """Key-value store kept as a single JSON object on disk.

    Writes go to a temp file in the same directory and are swapped in with
    os.replace, so a crash never leaves a half-written file behind.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise FileReadError(f"저장 파일을 읽을 수 없습니다: {self._path}") from e
        if not isinstance(data, dict):
            raise FileReadError(f"저장 파일 형식이 올바르지 않습니다: {self._path}")
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            items = self._read_all()
        except FileReadError as e:
            raise PersistenceWriteError(str(e)) from e
        items[key] = value

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".roster-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(items, f, ensure_ascii=False)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceWriteError(f"저장 파일을 쓸 수 없습니다: {self._path}") from e
