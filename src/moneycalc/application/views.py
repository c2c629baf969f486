# src/moneycalc/application/views.py
"""
View Protocols - What Commands Need From the UI Shell

Commands depend on these protocols only; the Tk widgets in
moneycalc.adapters.tk implement them and tests use simple fakes.
"""
from __future__ import annotations

from typing import Protocol

from moneycalc.domain.models import ChartSpec, Currency, ExchangeRateTimeSeries, Money


class CurrencyDialog(Protocol):
    def get(self) -> Currency:
        ...

    def get_selected_index(self) -> int:
        ...

    def set_selected_index(self, index: int) -> None:
        ...


class MoneyDialog(Protocol):
    def get(self) -> Money:
        ...

    def get_selected_index(self) -> int:
        ...

    def set_selected_index(self, index: int) -> None:
        ...


class MoneyDisplay(Protocol):
    def show(self, source: Money, result: Money) -> None:
        ...


class ContentDisplay(Protocol):
    def show_chart(self, chart: ChartSpec, series: ExchangeRateTimeSeries) -> None:
        ...

    def show_info(self) -> None:
        ...


class ErrorReporter(Protocol):
    def show_error(self, message: str, title: str = "Error") -> None:
        ...
