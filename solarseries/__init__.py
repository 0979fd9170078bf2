from . import (
    canon,
    types,
    exceptions,
    config,
    schema,
    validate,
    ingest,
    transform,
)
from .schema import ChartSeries, SeriesPoint
from .transform import aggregate

__all__ = [
    "canon",
    "types",
    "exceptions",
    "config",
    "schema",
    "validate",
    "ingest",
    "transform",
    "ChartSeries",
    "SeriesPoint",
    "aggregate",
]
