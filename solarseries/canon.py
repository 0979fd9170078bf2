from __future__ import annotations
from typing import Final

DATE_COL: Final[str] = "date"
VALUE_COL: Final[str] = "kWh electricity/day"
KWH_COL: Final[str] = "kwh"
FRAME_COLS: Final[list[str]] = [DATE_COL, KWH_COL]

DELIMITER: Final[str] = ","
DATE_SEP: Final[str] = "/"
DATE_FORMAT: Final[str] = "%m/%d/%Y"

DAILY_WINDOW: Final[int] = 30
ROLLING_WINDOW: Final[int] = 365

GRANULARITIES: Final[tuple[str, ...]] = ("daily", "weekly", "monthly", "yearly")
BUCKETINGS: Final[tuple[str, ...]] = ("calendar", "contiguous")
DEFAULT_GRANULARITY: Final[str] = "daily"
DEFAULT_BUCKETING: Final[str] = "calendar"

# Slash-delimited date fields each granularity reads: M/D/Y -> month=0, year=2
MONTH_FIELD: Final[int] = 0
YEAR_FIELD: Final[int] = 2
MIN_DATE_FIELDS: dict[str, int] = {
    "daily": 1,
    "weekly": 1,
    "monthly": 3,
    "yearly": 3,
}

TITLE_TEMPLATE: Final[str] = "Solar Power Production ({granularity})"
