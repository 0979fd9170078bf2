from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from . import canon, validate
from .config import SeriesConfig, default_config
from .types import ProductionFrame, Row

logger = logging.getLogger(__name__)


def parse_table(raw_text: str) -> list[Row]:
    """
    Split delimited text into row records keyed by the header line.

    Naive split on ',' (no quoting). Ragged lines produce rows missing the
    unmatched trailing columns; extra values past the header are dropped.
    Blank lines are kept as-is, so a trailing newline yields one row with an
    empty first column.
    """
    if not raw_text:
        return []

    lines = [line.rstrip("\r") for line in raw_text.split("\n")]
    headers = lines[0].split(canon.DELIMITER)

    rows: list[Row] = []
    for line in lines[1:]:
        values = line.split(canon.DELIMITER)
        rows.append(dict(zip(headers, values)))
    return rows


def read_csv(path: str | Path, encoding: str = "utf-8") -> list[Row]:
    """Read a production CSV file and parse it with parse_table."""
    text = Path(path).read_text(encoding=encoding)
    rows = parse_table(text)
    logger.debug("Loaded %d rows from %s", len(rows), path)
    return rows


def _is_blank(row: Row) -> bool:
    return all(not (v or "").strip() for v in row.values())


def to_frame(
    rows: Sequence[Row], config: Optional[SeriesConfig] = None
) -> ProductionFrame:
    """
    Validate raw rows once and normalise them to a ProductionFrame:
      - columns: date (raw M/D/Y string), kwh (float, NaN if unparsable)
      - blank rows dropped
      - a non-blank row without a date raises MalformedDateError
    """
    cfg = config or default_config()
    strict = cfg.on_bad_value == "raise"

    dates: list[str] = []
    kwh: list[float] = []
    dropped = 0
    for pos, row in enumerate(rows):
        if _is_blank(row):
            dropped += 1
            continue
        date = row.get(cfg.date_column)
        validate.split_date(date or None, 1, pos)
        dates.append(str(date))
        kwh.append(validate.parse_kwh(row.get(cfg.value_column), strict, pos))

    if dropped:
        logger.debug("Dropped %d blank row(s)", dropped)

    df = pd.DataFrame(
        {
            canon.DATE_COL: pd.Series(dates, dtype=object),
            canon.KWH_COL: np.asarray(kwh, dtype=float),
        },
        columns=canon.FRAME_COLS,
    )
    return ProductionFrame(df)
