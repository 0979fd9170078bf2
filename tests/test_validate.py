from datetime import datetime
import math

import pandas as pd
import pytest

from solarseries import exceptions, validate
from solarseries.config import SeriesConfig


def test_split_date_fields():
    assert validate.split_date("6/15/2021", 3) == ["6", "15", "2021"]


def test_split_date_too_few_fields():
    with pytest.raises(exceptions.MalformedDateError, match="at least 3"):
        validate.split_date("6/15", 3, position=4)


def test_split_date_missing():
    with pytest.raises(exceptions.MalformedDateError):
        validate.split_date(None)


def test_parse_date_without_zero_padding():
    assert validate.parse_date("6/5/2021") == datetime(2021, 6, 5)
    assert validate.parse_date("06/05/2021") == datetime(2021, 6, 5)


def test_parse_date_rejects_day_first():
    with pytest.raises(exceptions.MalformedDateError):
        validate.parse_date("15/6/2021")


def test_parse_kwh():
    assert validate.parse_kwh(" 3.25 ") == 3.25
    assert math.isnan(validate.parse_kwh(None))
    assert math.isnan(validate.parse_kwh(""))


def test_parse_kwh_strict():
    with pytest.raises(exceptions.NumericParseError):
        validate.parse_kwh("x", strict=True)
    with pytest.raises(exceptions.NumericParseError):
        validate.parse_kwh(None, strict=True)


def test_errors_are_value_errors():
    assert issubclass(exceptions.MalformedDateError, ValueError)
    assert issubclass(exceptions.NumericParseError, exceptions.SolarSeriesError)


def test_require():
    exceptions.require(True, "unused")
    with pytest.raises(exceptions.EmptyInputError, match="boom"):
        exceptions.require(False, "boom", exceptions.EmptyInputError)


def test_assert_frame_missing_column():
    with pytest.raises(exceptions.SolarSeriesError, match="kwh"):
        validate.assert_frame(pd.DataFrame({"date": ["1/1/2021"]}))


def test_assert_frame_requires_float_values():
    df = pd.DataFrame({"date": ["1/1/2021"], "kwh": ["1"]})
    with pytest.raises(exceptions.SolarSeriesError):
        validate.assert_frame(df)


def test_config_rejects_unknown_policies():
    with pytest.raises(ValueError, match="on_bad_value"):
        SeriesConfig(on_bad_value="strict")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="bucketing"):
        SeriesConfig(bucketing="rolling")  # type: ignore[arg-type]
