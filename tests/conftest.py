import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

HEADER = "date,kWh electricity/day"


def mdy(ts: pd.Timestamp) -> str:
    """M/D/Y without zero padding, as in the production CSV."""
    return f"{ts.month}/{ts.day}/{ts.year}"


@pytest.fixture
def make_rows():
    """Factory: one row per day from start, values default to 0, 1, 2, ..."""

    def _make(start="2021-01-01", periods=10, values=None):
        days = pd.date_range(start, periods=periods, freq="D")
        vals = list(range(periods)) if values is None else list(values)
        return [
            {"date": mdy(d), "kWh electricity/day": str(v)} for d, v in zip(days, vals)
        ]

    return _make


@pytest.fixture
def csv_text(make_rows):
    rows = make_rows("2021-01-01", periods=90)
    lines = [HEADER] + [f"{r['date']},{r['kWh electricity/day']}" for r in rows]
    return "\n".join(lines) + "\n"


@pytest.fixture
def csv_file(tmp_path, csv_text):
    path = tmp_path / "PV_Elec_Gas3.csv"
    path.write_text(csv_text)
    return path
