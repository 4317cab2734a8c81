from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional, Protocol

from ..core.constants import BAND_URL, EXPORT_FILENAME_PREFIX
from ..core.exceptions import FileReadError, MalformedJsonError, ValidationError
from ..members.model import Member
from ..members.store import RosterStore
from ..members.validator import validate_members

logger = logging.getLogger(__name__)


class Clipboard(Protocol):
    """Host clipboard. Copying is best-effort; implementations may raise."""

    def copy(self, text: str) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class ExportBundle:
    filename: str
    content: str
    clipboard_copied: Optional[bool]
    message: str
    band_url: str = BAND_URL


@dataclass(frozen=True)
class ImportPreview:
    """A validated import, waiting for the operator's confirmation."""

    members: list[Member]

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def confirmation_message(self) -> str:
        return (
            f"총 {self.count}명의 데이터를 가져옵니다.\n\n"
            "⚠️ 경고: 이 작업은 현재 앱에 저장된 모든 데이터를 덮어씁니다.\n\n"
            "계속하시겠습니까?"
        )


def export_filename(today: date) -> str:
    return f"{EXPORT_FILENAME_PREFIX}_{today.isoformat()}.json"


def read_import_bytes(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FileReadError("파일을 읽었지만 내용이 비어있거나 텍스트가 아닙니다.") from e


def read_import_file(path: str | Path) -> str:
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise FileReadError("파일을 읽는 도중 오류가 발생했습니다.") from e
    return read_import_bytes(data)


def parse_import(text: str) -> ImportPreview:
    """Decode and validate import text. Nothing is applied yet."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedJsonError() from e
    return ImportPreview(members=validate_members(parsed))


class RosterTransferService:
    """Use case: backup (export) and restore (import) of the whole roster."""

    def __init__(self, store: RosterStore, *, clipboard: Optional[Clipboard] = None):
        self._store = store
        self._clipboard = clipboard

    def export_roster(self, *, today: date) -> ExportBundle:
        if len(self._store) == 0:
            raise ValidationError("내보낼 데이터가 없습니다.")

        content = self._store.to_json(indent=2)
        copied = self._copy_to_clipboard(content)

        if copied is None:
            message = "데이터 파일이 컴퓨터에 저장되었습니다.\n\n네이버 밴드를 열어 데이터를 붙여넣기 하시겠습니까?"
        elif copied:
            message = "데이터 파일 저장 및 클립보드 복사가 완료되었습니다.\n\n네이버 밴드를 열어 데이터를 붙여넣기 하시겠습니까?"
        else:
            message = "데이터 파일은 저장되었지만 클립보드 복사에 실패했습니다.\n\n네이버 밴드를 열어 수동으로 백업하시겠습니까?"

        return ExportBundle(
            filename=export_filename(today),
            content=content,
            clipboard_copied=copied,
            message=message,
        )

    def _copy_to_clipboard(self, content: str) -> Optional[bool]:
        if self._clipboard is None:
            return None
        try:
            self._clipboard.copy(content)
        except Exception:
            # Clipboard is optional; the file download already happened.
            logger.exception("Clipboard copy failed")
            return False
        return True

    def preview_import(self, text: str) -> ImportPreview:
        return parse_import(text)

    def apply_import(self, preview: ImportPreview) -> int:
        """Overwrite the roster with a confirmed preview. Not recoverable."""
        self._store.bulk_replace(preview.members)
        logger.info("Imported %d members", preview.count)
        return preview.count

    def import_text(self, text: str, *, confirmed: bool) -> ImportPreview:
        """Validate `text` and apply it only when the operator confirmed."""
        preview = parse_import(text)
        if confirmed:
            self.apply_import(preview)
        return preview
