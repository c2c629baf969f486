# src/moneycalc/adapters/charting/timeseries_chart.py
"""
Time-Series Chart - Matplotlib Point Buffer

This module owns the Matplotlib figure the rate history is drawn on and the
line's point buffer. It implements the animator's PointSink: the animator
resets it and appends points one at a time; every change asks the host
canvas to redraw.

Files that USE this module:
- moneycalc.adapters.tk.displays (embeds the figure with FigureCanvasTkAgg)
- tests.test_timeseries_chart (unit tests on a headless Figure)

Files that this module USES:
- moneycalc.domain.models (ChartSpec)
"""
from __future__ import annotations

from datetime import date
from typing import Callable, Optional

import matplotlib.dates as mdates
from matplotlib.figure import Figure

from moneycalc.domain.models import ChartSpec

BACKGROUND_COLOR = "#d3d3d3"
LINE_COLOR = "#0d68a3"


def _noop() -> None:
    pass


class TimeSeriesChart:
    """
    A single dated line on a Matplotlib figure.

    Not thread-safe: call ``reset`` and ``add_point`` from the UI thread.
    """

    def __init__(self, figure: Optional[Figure] = None, redraw: Callable[[], None] = _noop):
        self.figure = figure or Figure(figsize=(7, 4.5), dpi=100)
        self.redraw = redraw
        self.figure.set_facecolor(BACKGROUND_COLOR)
        self.axes = self.figure.add_subplot(111)
        (self.line,) = self.axes.plot([], [], color=LINE_COLOR, linewidth=1.2)
        self.axes.xaxis_date()
        locator = mdates.AutoDateLocator()
        self.axes.xaxis.set_major_locator(locator)
        self.axes.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))
        self.axes.grid(True, alpha=0.3)
        self._days: list[date] = []
        self._rates: list[float] = []

    @property
    def points(self) -> list[tuple[str, float]]:
        """Points currently drawn, as ('YYYY-MM-DD', rate) pairs."""
        return [(d.isoformat(), r) for d, r in zip(self._days, self._rates)]

    def reset(self, chart: ChartSpec) -> None:
        self._days.clear()
        self._rates.clear()
        self.axes.set_title(chart.title)
        self.axes.set_xlabel(chart.x_axis_label)
        self.axes.set_ylabel(chart.y_axis_label)
        self._refresh()

    def add_point(self, day: str, rate: float) -> None:
        parsed = date.fromisoformat(day)
        # Same day again updates the existing point
        if self._days and self._days[-1] == parsed:
            self._rates[-1] = rate
        else:
            self._days.append(parsed)
            self._rates.append(rate)
        self._refresh()

    def _refresh(self) -> None:
        if self._days:
            self.line.set_data(mdates.date2num(self._days), self._rates)
            self.axes.relim()
            self.axes.autoscale_view()
        else:
            self.line.set_data([], [])
        self.redraw()
