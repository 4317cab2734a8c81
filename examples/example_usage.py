"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the roster logic lives in the services and
the view projector.
"""

import importlib

from config import get_settings_module

from src.church_roster.church_roster.common.datetime_utils import today_string
from src.church_roster.church_roster.container import build_container
from src.church_roster.church_roster.core.enums import ALL_FILTER
from src.church_roster.church_roster.views.projector import counts_for_scope


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    print(counts_for_scope(container.store.members, ALL_FILTER, today_string()))


if __name__ == "__main__":
    main()
