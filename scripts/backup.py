"""Backup the roster.

Note: Writes the same JSON file the "내보내기" button offers
(예배출석_YYYY-MM-DD.json) into ./backups, whatever the storage backend is.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.church_roster.church_roster.common.datetime_utils import today_local
from src.church_roster.church_roster.container import build_container
from src.church_roster.church_roster.core.exceptions import ValidationError
from src.church_roster.church_roster.core.logging import configure_logging


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(settings=settings)

    try:
        bundle = container.transfer_service.export_roster(today=today_local())
    except ValidationError as e:
        raise SystemExit(str(e))

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / bundle.filename
    out_file.write_text(bundle.content, encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
