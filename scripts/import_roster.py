"""Import a roster JSON file (e.g. a backup) into the configured storage.

WARNING: replaces every member currently stored. Pass --yes to skip the prompt.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.church_roster.church_roster.container import build_container
from src.church_roster.church_roster.core.exceptions import ImportDataError
from src.church_roster.church_roster.core.logging import configure_logging
from src.church_roster.church_roster.transfer.service import read_import_file


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("file", type=Path)
    parser.add_argument("--yes", action="store_true", help="do not ask for confirmation")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(settings=settings)

    try:
        preview = container.transfer_service.preview_import(read_import_file(args.file))
    except ImportDataError as e:
        raise SystemExit(f"❌ 데이터 가져오기 실패:\n\n{e}")

    if not args.yes:
        answer = input(preview.confirmation_message + " (y/N) ").strip().lower()
        if answer not in {"y", "yes"}:
            print("데이터 가져오기 작업을 취소했습니다.")
            return

    count = container.transfer_service.apply_import(preview)
    print(f"✅ 성공적으로 {count}명의 데이터를 가져왔습니다!")


if __name__ == "__main__":
    main()
