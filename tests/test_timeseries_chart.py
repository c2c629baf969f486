"""
Time-Series Chart Tests - Unit Tests for the Matplotlib Point Buffer

Runs on a plain matplotlib Figure, no GUI backend involved.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- moneycalc.adapters.charting.timeseries_chart (TimeSeriesChart for testing)
- matplotlib (headless Figure)
- pytest (testing framework)
"""
from datetime import date
from unittest.mock import Mock

import matplotlib.dates as mdates
from matplotlib.figure import Figure

from moneycalc.adapters.charting.timeseries_chart import TimeSeriesChart
from moneycalc.domain.models import ChartSpec


class TestTimeSeriesChart:
    def test_reset_applies_labels(self):
        chart = TimeSeriesChart(Figure())
        chart.reset(ChartSpec("EUR/USD", "Date", "Rate"))

        assert chart.axes.get_title() == "EUR/USD"
        assert chart.axes.get_xlabel() == "Date"
        assert chart.axes.get_ylabel() == "Rate"
        assert chart.points == []

    def test_add_points(self):
        redraw = Mock()
        chart = TimeSeriesChart(Figure(), redraw=redraw)
        chart.reset(ChartSpec("EUR/USD", "Date", "Rate"))
        chart.add_point("2024-01-01", 1.1)
        chart.add_point("2024-01-02", 1.2)

        assert chart.points == [("2024-01-01", 1.1), ("2024-01-02", 1.2)]
        assert list(chart.line.get_ydata()) == [1.1, 1.2]
        assert list(chart.line.get_xdata()) == list(mdates.date2num([date(2024, 1, 1), date(2024, 1, 2)]))
        assert redraw.call_count == 3

    def test_same_day_updates_last_point(self):
        chart = TimeSeriesChart(Figure())
        chart.add_point("2024-01-01", 1.1)
        chart.add_point("2024-01-01", 1.15)

        assert chart.points == [("2024-01-01", 1.15)]

    def test_reset_clears_previous_points(self):
        chart = TimeSeriesChart(Figure())
        chart.add_point("2024-01-01", 1.1)
        chart.reset(ChartSpec("EUR/GBP", "Date", "Rate"))

        assert chart.points == []
        assert len(chart.line.get_xdata()) == 0
        assert chart.axes.get_title() == "EUR/GBP"

    def test_default_figure(self):
        chart = TimeSeriesChart()
        assert isinstance(chart.figure, Figure)
