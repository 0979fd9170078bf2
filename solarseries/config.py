from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from . import canon
from .types import Bucketing

BAD_VALUE_POLICIES = ("nan", "raise")


@dataclass
class SeriesConfig:
    # CSV column contract
    date_column: str = canon.DATE_COL
    value_column: str = canon.VALUE_COL

    # Tail windows (rows, one row per day)
    daily_window: int = canon.DAILY_WINDOW
    rolling_window: int = canon.ROLLING_WINDOW  # weekly + monthly; yearly uses all rows

    bucketing: Bucketing = "calendar"

    # Unparsable kWh: "nan" poisons the bucket mean, "raise" rejects at load
    on_bad_value: Literal["nan", "raise"] = "nan"

    def __post_init__(self) -> None:
        if self.bucketing not in canon.BUCKETINGS:
            raise ValueError(
                f"Unknown bucketing {self.bucketing!r}; expected one of {canon.BUCKETINGS}."
            )
        if self.on_bad_value not in BAD_VALUE_POLICIES:
            raise ValueError(
                f"Unknown on_bad_value {self.on_bad_value!r}; expected one of {BAD_VALUE_POLICIES}."
            )


def default_config() -> SeriesConfig:
    return SeriesConfig()
