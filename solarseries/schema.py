from __future__ import annotations

import pandas as pd
from pydantic import BaseModel, Field

from . import canon


class SeriesPoint(BaseModel):
    label: str
    value: float


class ChartSeries(BaseModel):
    title: str
    granularity: str = canon.DEFAULT_GRANULARITY
    points: list[SeriesPoint] = Field(default_factory=list)

    @property
    def labels(self) -> list[str]:
        return [p.label for p in self.points]

    @property
    def values(self) -> list[float]:
        return [p.value for p in self.points]

    @property
    def is_empty(self) -> bool:
        return not self.points

    def to_frame(self) -> pd.DataFrame:
        """Points as a two-column frame ('label', 'value'), in series order."""
        return pd.DataFrame(
            {"label": self.labels, "value": self.values}, columns=["label", "value"]
        )

    @classmethod
    def empty(cls, granularity: str = canon.DEFAULT_GRANULARITY) -> "ChartSeries":
        return cls(
            title=canon.TITLE_TEMPLATE.format(granularity=granularity),
            granularity=granularity,
        )
