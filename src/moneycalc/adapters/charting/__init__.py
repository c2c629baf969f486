# src/moneycalc/adapters/charting/__init__.py
"""
Charting Adapters - Matplotlib Rendering

This package contains the Matplotlib chart the animator draws into.
"""

from moneycalc.adapters.charting.timeseries_chart import TimeSeriesChart

__all__ = ["TimeSeriesChart"]
