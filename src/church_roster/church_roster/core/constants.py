"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

import re

STORAGE_KEY = "churchAttendanceMembers"
ITEMS_PER_PAGE = 15
DEFAULT_POSITION = "성도"

# Matched with fullmatch(); ASCII digits only.
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

EXPORT_FILENAME_PREFIX = "예배출석"
BAND_URL = "https://band.us"
