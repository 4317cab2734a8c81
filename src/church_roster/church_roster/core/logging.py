"""Logging setup shared by the app and the scripts."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[church-roster] %(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stdout. Safe to call more than once."""
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stdout)
    logging.getLogger().setLevel(numeric_level)
