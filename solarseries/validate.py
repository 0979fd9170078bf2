from __future__ import annotations
from datetime import datetime
from typing import Optional

import numpy as np
import pandas as pd

from . import canon, exceptions


def split_date(date: Optional[str], min_fields: int = 1, position: int = -1) -> list[str]:
    """Split an M/D/Y string into its raw fields, requiring at least min_fields."""
    if date is None:
        raise exceptions.MalformedDateError(f"Row {position}: missing date.")
    fields = str(date).split(canon.DATE_SEP)
    if len(fields) < min_fields:
        raise exceptions.MalformedDateError(
            f"Row {position}: date {date!r} has {len(fields)} field(s), "
            f"expected at least {min_fields} (M/D/Y)."
        )
    return fields


def parse_date(date: Optional[str], position: int = -1) -> datetime:
    """Parse an M/D/Y string (zero padding optional) into a datetime."""
    split_date(date, 3, position)
    try:
        return datetime.strptime(str(date).strip(), canon.DATE_FORMAT)
    except ValueError as exc:
        raise exceptions.MalformedDateError(
            f"Row {position}: date {date!r} is not a valid M/D/Y date."
        ) from exc


def parse_kwh(value: Optional[str], strict: bool = False, position: int = -1) -> float:
    """
    Parse a kWh string to float.

    Unparsable (or missing) values become NaN unless strict, in which case
    NumericParseError is raised.
    """
    if value is not None:
        try:
            return float(value.strip())
        except ValueError:
            pass
    if strict:
        raise exceptions.NumericParseError(
            f"Row {position}: value {value!r} is not a number."
        )
    return float("nan")


def assert_frame(df: pd.DataFrame) -> None:
    for col in canon.FRAME_COLS:
        if col not in df.columns:
            raise exceptions.SolarSeriesError(f"Missing required column '{col}'.")
    if not np.issubdtype(df[canon.KWH_COL].dtype, np.floating):
        raise exceptions.SolarSeriesError("Column 'kwh' must be float.")
