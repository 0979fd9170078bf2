from __future__ import annotations
from typing import Dict, Literal

import pandas as pd

# Raw CSV record: header name -> raw string value. Ragged rows lack trailing keys.
Row = Dict[str, str]

Granularity = Literal["daily", "weekly", "monthly", "yearly"]
Bucketing = Literal["calendar", "contiguous"]


class ProductionFrame(pd.DataFrame):
    """
    Typed daily production table, built once from raw rows.

    Expected:
      - RangeIndex in input (chronological) order
      - Columns: ['date', 'kwh']; 'date' is the raw M/D/Y string,
        'kwh' is float64 (NaN where the source value did not parse)
    """

    @property
    def _constructor(self):
        return ProductionFrame

    @property
    def date(self) -> pd.Series:
        return self["date"]

    @property
    def kwh(self) -> pd.Series:
        return self["kwh"]
