"""Characterisation of contiguous-run bucketing against calendar buckets."""

import pandas as pd
import pytest

from solarseries import transform


@pytest.mark.parametrize(
    "keys, runs",
    [
        (["1", "1", "2", "2", "1"], [1, 1, 2, 2, 3]),
        (["a"], [1]),
        (["x", "y", "z"], [1, 2, 3]),
    ],
)
def test_contiguous_runs(keys, runs):
    assert transform.contiguous_runs(pd.Series(keys)).tolist() == runs


def test_monthly_run_count_matches_month_runs(make_rows):
    # 200 days from 2021-03-10 touch Mar..Sep 2021
    rows = make_rows("2021-03-10", periods=200)
    legacy = transform.aggregate(rows, "monthly", bucketing="contiguous")
    calendar = transform.aggregate(rows, "monthly", bucketing="calendar")
    assert legacy.labels == ["3", "4", "5", "6", "7", "8", "9"]
    assert legacy == calendar


def test_yearly_legacy_splits_interleaved_years():
    rows = [
        {"date": "12/31/2021", "kWh electricity/day": "1"},
        {"date": "1/1/2022", "kWh electricity/day": "3"},
        {"date": "12/30/2021", "kWh electricity/day": "5"},
    ]
    legacy = transform.aggregate(rows, "yearly", bucketing="contiguous")
    calendar = transform.aggregate(rows, "yearly")
    assert [(p.label, p.value) for p in legacy.points] == [
        ("2021", 1.0),
        ("2022", 3.0),
        ("2021", 5.0),
    ]
    assert [(p.label, p.value) for p in calendar.points] == [("2021", 3.0), ("2022", 3.0)]
