from __future__ import annotations
import logging
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from . import canon, exceptions, ingest, validate
from .config import SeriesConfig, default_config
from .schema import ChartSeries, SeriesPoint
from .types import Bucketing, Granularity, ProductionFrame, Row

logger = logging.getLogger(__name__)

Rows = Union[Sequence[Row], pd.DataFrame]


def _nan_mean(values: pd.Series) -> float:
    # sum / count over every row in the bucket; a NaN poisons the mean
    arr = values.to_numpy(dtype=float)
    return float(np.sum(arr) / len(arr))


def tail_window(df: ProductionFrame, granularity: str, config: SeriesConfig) -> pd.DataFrame:
    """Rows a granularity looks at: daily tail, rolling tail, or everything for yearly."""
    if granularity == "daily":
        return df.tail(config.daily_window)
    if granularity in ("weekly", "monthly"):
        return df.tail(config.rolling_window)
    return df


def date_fields(dates: pd.Series, granularity: str) -> pd.Series:
    """Split each date into its raw M/D/Y fields, enforcing the granularity's minimum."""
    min_fields = canon.MIN_DATE_FIELDS[granularity]
    return pd.Series(
        [validate.split_date(d, min_fields, pos) for pos, d in dates.items()],
        index=dates.index,
        dtype=object,
    )


def contiguous_runs(keys: pd.Series) -> pd.Series:
    """Run id per row: increments whenever the key differs from the previous row."""
    return keys.ne(keys.shift()).cumsum()


def bucket_keys(
    window: pd.DataFrame, granularity: str, bucketing: str
) -> tuple[pd.Series, pd.Series]:
    """
    Return (group_key, label) Series aligned to window rows.

    contiguous: group_key is a run id over the raw date / month / year field.
    calendar:   group_key is an integer calendar key (ISO year-week, year-month,
                year) from the parsed date, so buckets sort chronologically.
    """
    dates = window[canon.DATE_COL]
    fields = date_fields(dates, granularity)

    if granularity == "weekly":
        label = dates.astype(str)
    elif granularity == "monthly":
        label = fields.map(lambda f: f[canon.MONTH_FIELD])
    else:
        label = fields.map(lambda f: f[canon.YEAR_FIELD])

    if bucketing == "contiguous":
        return contiguous_runs(label), label

    parsed = [validate.parse_date(d, pos) for pos, d in dates.items()]
    if granularity == "weekly":
        keys = [ts.isocalendar()[0] * 100 + ts.isocalendar()[1] for ts in parsed]
    elif granularity == "monthly":
        keys = [ts.year * 100 + ts.month for ts in parsed]
    else:
        keys = [ts.year for ts in parsed]
    return pd.Series(keys, index=window.index, dtype="int64"), label


def bucket_means(
    values: pd.Series, keys: pd.Series, labels: pd.Series, *, sort: bool
) -> pd.DataFrame:
    """
    Mean value per bucket, labelled by the first row of each bucket.

    Returns columns ['label', 'value'] in bucket order.
    """
    frame = pd.DataFrame({"key": keys, "label": labels, "value": values})
    g = frame.groupby("key", sort=sort)
    out = pd.DataFrame(
        {
            "label": g["label"].first(),
            "value": g["value"].agg(_nan_mean),
        }
    )
    return out.reset_index(drop=True)


def aggregate(
    rows: Rows,
    granularity: Granularity = "daily",
    *,
    bucketing: Optional[Bucketing] = None,
    config: Optional[SeriesConfig] = None,
) -> ChartSeries:
    """
    Aggregate daily production rows into a chart series.

    - daily:   last `daily_window` rows, one point per row (label = date)
    - weekly:  last `rolling_window` rows, mean per week (label = first date)
    - monthly: last `rolling_window` rows, mean per month (label = month field)
    - yearly:  all rows, mean per year (label = year field)

    Bucketing 'calendar' (default) groups by calendar keys and sorts buckets
    chronologically; 'contiguous' opens a new bucket whenever the raw key
    changes from one row to the next, reproducing the legacy chart output.

    Empty input returns an empty series. Malformed dates raise
    MalformedDateError for the whole call.
    """
    cfg = config or default_config()
    mode = bucketing or cfg.bucketing
    if granularity not in canon.GRANULARITIES:
        raise ValueError(
            f"Unknown granularity {granularity!r}; expected one of {canon.GRANULARITIES}."
        )
    if mode not in canon.BUCKETINGS:
        raise ValueError(
            f"Unknown bucketing {mode!r}; expected one of {canon.BUCKETINGS}."
        )

    df = rows if isinstance(rows, pd.DataFrame) else ingest.to_frame(rows, cfg)
    validate.assert_frame(df)
    if df.empty:
        return ChartSeries.empty(granularity)

    window = tail_window(df, granularity, cfg)

    if granularity == "daily":
        date_fields(window[canon.DATE_COL], granularity)
        out = pd.DataFrame(
            {"label": window[canon.DATE_COL].astype(str), "value": window[canon.KWH_COL]}
        )
    else:
        keys, labels = bucket_keys(window, granularity, mode)
        out = bucket_means(
            window[canon.KWH_COL], keys, labels, sort=(mode == "calendar")
        )

    points = [
        SeriesPoint(label=str(label), value=float(value))
        for label, value in zip(out["label"], out["value"])
    ]
    logger.debug(
        "Aggregated %d rows into %d %s point(s) (%s)",
        len(window),
        len(points),
        granularity,
        mode,
    )
    return ChartSeries(
        title=canon.TITLE_TEMPLATE.format(granularity=granularity),
        granularity=granularity,
        points=points,
    )


def series_for_display(
    rows: Rows, granularity: Granularity = "daily", **kwargs
) -> ChartSeries:
    """aggregate(), but data problems are logged and yield an empty series."""
    try:
        return aggregate(rows, granularity, **kwargs)
    except exceptions.SolarSeriesError as exc:
        logger.warning("Cannot build %s series: %s", granularity, exc)
        return ChartSeries.empty(granularity)
