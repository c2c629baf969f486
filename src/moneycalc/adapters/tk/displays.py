# src/moneycalc/adapters/tk/displays.py
"""
Displays - Money Panel, Chart/Info Area and Error Dialogs

Tk widgets implementing the MoneyDisplay, ContentDisplay and ErrorReporter
view protocols. The content area switches between the animated rate chart
(Matplotlib embedded with FigureCanvasTkAgg) and the help page.

Files that USE this module:
- moneycalc.adapters.tk.main_frame (lays out the displays)
- moneycalc.app (wires them into the commands)

Files that this module USES:
- moneycalc.adapters.charting.timeseries_chart (TimeSeriesChart point buffer)
- moneycalc.adapters.formatting (money lines, last update, help text)
- moneycalc.application.chart_animator (ChartAnimator)
- moneycalc.config (settings for display precision and cutoff)
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox
from typing import Callable, Optional

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg  # Embed charts into Tkinter

from moneycalc.adapters.charting.timeseries_chart import TimeSeriesChart
from moneycalc.adapters.formatting.formatter import (
    format_last_update,
    format_result_line,
    format_source_line,
)
from moneycalc.adapters.formatting.info_page import load_info_text
from moneycalc.adapters.tk import style
from moneycalc.application.chart_animator import ChartAnimator, Schedule
from moneycalc.config import settings
from moneycalc.domain.models import ChartSpec, ExchangeRateTimeSeries, Money

log = logging.getLogger(__name__)


class MoneyPanel(tk.Frame):
    """Right-hand panel with the source amount, the result and the last update."""

    def __init__(self, master: tk.Misc):
        super().__init__(master, background=style.BODY_COLOR, padx=10, pady=10)
        self._source = self._label(style.SOURCE_FONT)
        self._result = self._label(style.RESULT_FONT)
        self._timestamp = self._label(style.TIMESTAMP_FONT)

    def _label(self, font) -> tk.Label:
        label = tk.Label(self, font=font, background=style.BODY_COLOR, foreground=style.BODY_FONT_COLOR, anchor="w")
        label.pack(fill=tk.X, pady=8)
        return label

    def show(self, source: Money, result: Money) -> None:
        decimals = settings.display_decimals
        self._source.configure(text=format_source_line(source, decimals))
        self._result.configure(text=format_result_line(result, decimals))
        self._timestamp.configure(text=format_last_update(settings.last_update_cutoff_time))


class ChartContentDisplay(tk.Frame):
    """Center area showing either the animated chart or the help page."""

    def __init__(self, master: tk.Misc, schedule: Schedule):
        super().__init__(master, background=style.BODY_COLOR)
        self._canvas: Optional[FigureCanvasTkAgg] = None
        self.chart = TimeSeriesChart(redraw=self._redraw)
        self._canvas = FigureCanvasTkAgg(self.chart.figure, master=self)
        self.animator = ChartAnimator(self.chart, schedule=schedule)

        self._info = tk.Text(
            self,
            wrap=tk.WORD,
            font=style.INFO_FONT,
            background=style.BODY_COLOR,
            foreground=style.BODY_FONT_COLOR,
            relief=tk.FLAT,
            padx=20,
            pady=20,
        )
        self._info.insert("1.0", load_info_text())
        self._info.configure(state=tk.DISABLED)

    def _redraw(self) -> None:
        if self._canvas is not None:
            self._canvas.draw_idle()

    def show_chart(self, chart: ChartSpec, series: ExchangeRateTimeSeries) -> None:
        self._info.pack_forget()
        self._canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)
        self.animator.render(series, chart)

    def show_info(self) -> None:
        self.animator.cancel()
        self._canvas.get_tk_widget().pack_forget()
        self._info.pack(fill=tk.BOTH, expand=True)

    def close(self) -> None:
        self.animator.cancel()


class TkErrorReporter:
    def __init__(self, parent: Optional[tk.Misc] = None, show: Callable[..., object] = messagebox.showerror):
        self.parent = parent
        self._show = show

    def show_error(self, message: str, title: str = "Error") -> None:
        self._show(title, message, parent=self.parent)
