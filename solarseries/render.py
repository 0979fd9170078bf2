from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from . import exceptions
from .schema import ChartSeries

logger = logging.getLogger(__name__)

BAR_FACE = (75 / 255, 192 / 255, 192 / 255, 0.2)
BAR_EDGE = (75 / 255, 192 / 255, 192 / 255, 1.0)


def plot_series(series: ChartSeries, ax: Optional[Axes] = None, **style) -> Axes:
    """
    Draw a series as a bar chart on ax (a new figure's axes if None).

    The value axis always starts at zero. Raises EmptyInputError for an
    empty series.
    """
    exceptions.require(
        not series.is_empty, "Nothing to plot: empty series.", exceptions.EmptyInputError
    )
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4))

    opts = {"color": BAR_FACE, "edgecolor": BAR_EDGE, "linewidth": 1}
    opts.update(style)
    # positional x: labels repeat across years (month "2" twice)
    x = list(range(len(series.points)))
    ax.bar(x, series.values, label=series.title, **opts)
    ax.set_xticks(x, series.labels)
    ax.set_ylim(bottom=0)
    ax.set_ylabel("kWh / day")
    ax.legend(loc="upper left")
    if len(series.points) > 12:
        ax.tick_params(axis="x", labelrotation=90)
    return ax


class ChartSession:
    """
    Owns the currently rendered chart figure.

    Each update() releases the previous figure before drawing the new
    series; close() (or leaving the with-block) releases the last one.
    """

    def __init__(self, figsize: tuple[float, float] = (8, 4)):
        self.figsize = figsize
        self.figure: Optional[Figure] = None

    def __enter__(self) -> "ChartSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self.figure is not None:
            plt.close(self.figure)
            self.figure = None

    def update(self, series: ChartSeries) -> Optional[Figure]:
        """Re-render for a new series; returns None when there is nothing to draw."""
        self.close()
        fig, ax = plt.subplots(figsize=self.figsize)
        try:
            plot_series(series, ax=ax)
        except exceptions.EmptyInputError:
            plt.close(fig)
            logger.debug("No data for %r; chart withheld", series.title)
            return None
        except Exception:
            plt.close(fig)
            raise
        fig.tight_layout()
        self.figure = fig
        return fig


def save_chart(series: ChartSeries, path: str | Path, dpi: int = 100) -> bool:
    """Render series to an image file. Returns False if the series was empty."""
    with ChartSession() as session:
        fig = session.update(series)
        if fig is None:
            return False
        fig.savefig(path, dpi=dpi)
    logger.info("Wrote chart to %s", path)
    return True
