# src/moneycalc/adapters/tk/dialogs.py
"""
Input Dialogs - Amount and Currency Selectors

Tk widgets implementing the CurrencyDialog and MoneyDialog view protocols.
Selectors are filled once with ``define`` after the currency list loads.

Files that USE this module:
- moneycalc.adapters.tk.main_frame (tool bar embeds both dialogs)
- moneycalc.app (fills the selectors with the loaded currencies)

Files that this module USES:
- moneycalc.adapters.tk.style (colours)
- moneycalc.domain.models (Currency, Money)
- moneycalc.shared.validators (parse_amount)
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Optional, Sequence

from moneycalc.adapters.tk.style import HEADER_COLOR
from moneycalc.domain.models import Currency, Money
from moneycalc.shared.validators import parse_amount


class TkCurrencyDialog(tk.Frame):
    def __init__(self, master: tk.Misc):
        super().__init__(master, background=HEADER_COLOR)
        self._currencies: list[Currency] = []
        self._selector: Optional[ttk.Combobox] = None

    def define(self, currencies: Sequence[Currency], selected: int = 0) -> TkCurrencyDialog:
        self._currencies = list(currencies)
        self._selector = ttk.Combobox(
            self,
            state="readonly",
            width=28,
            values=[str(c) for c in self._currencies],
        )
        if self._currencies:
            self._selector.current(min(selected, len(self._currencies) - 1))
        self._selector.pack(side=tk.LEFT, padx=4)
        return self

    def get(self) -> Currency:
        return self._currencies[self.get_selected_index()]

    def get_selected_index(self) -> int:
        if self._selector is None:
            raise RuntimeError("Currency dialog used before define()")
        return self._selector.current()

    def set_selected_index(self, index: int) -> None:
        if self._selector is None:
            raise RuntimeError("Currency dialog used before define()")
        self._selector.current(index)


class TkMoneyDialog(tk.Frame):
    def __init__(self, master: tk.Misc):
        super().__init__(master, background=HEADER_COLOR)
        self._amount = tk.StringVar(value="1")
        self._from_dialog = TkCurrencyDialog(self)

    def define(self, currencies: Sequence[Currency]) -> TkMoneyDialog:
        tk.Label(self, text="Amount:", background=HEADER_COLOR, foreground="black").pack(side=tk.LEFT)
        ttk.Entry(self, textvariable=self._amount, width=10).pack(side=tk.LEFT, padx=4)
        tk.Label(self, text="From:", background=HEADER_COLOR, foreground="black").pack(side=tk.LEFT)
        self._from_dialog.define(currencies)
        self._from_dialog.pack(side=tk.LEFT)
        return self

    def get(self) -> Money:
        return Money(parse_amount(self._amount.get()), self._from_dialog.get())

    def get_selected_index(self) -> int:
        return self._from_dialog.get_selected_index()

    def set_selected_index(self, index: int) -> None:
        self._from_dialog.set_selected_index(index)
