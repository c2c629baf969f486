# src/moneycalc/adapters/tk/main_frame.py
"""
Main Frame - Window Layout of the Money Calculator

Lays out the tool bar (amount, source and target selectors, swap,
calculate and info buttons), the chart/info area, the money panel and the
footer. Buttons only know command names; the actions behind them are
looked up in the CommandRegistry when clicked.

Files that USE this module:
- moneycalc.app (creates the window)

Files that this module USES:
- moneycalc.adapters.tk.dialogs (TkMoneyDialog, TkCurrencyDialog)
- moneycalc.adapters.tk.displays (MoneyPanel, ChartContentDisplay)
- moneycalc.adapters.tk.dispatcher (TkUiDispatcher)
- moneycalc.application.commands (CommandRegistry, CommandName)
"""
from __future__ import annotations

import logging
import tkinter as tk
from typing import Callable, Optional

from moneycalc import __version__
from moneycalc.adapters.tk import style
from moneycalc.adapters.tk.dialogs import TkCurrencyDialog, TkMoneyDialog
from moneycalc.adapters.tk.dispatcher import TkUiDispatcher
from moneycalc.adapters.tk.displays import ChartContentDisplay, MoneyPanel
from moneycalc.application.commands import CommandName, CommandRegistry

log = logging.getLogger(__name__)


class MainFrame(tk.Tk):
    def __init__(self, registry: CommandRegistry):
        super().__init__()
        self.registry = registry
        self.dispatcher = TkUiDispatcher(self)
        self._on_close: Optional[Callable[[], None]] = None

        self.title(style.WINDOW_TITLE)
        self.geometry(style.WINDOW_SIZE)
        self.configure(background=style.BODY_COLOR)
        self.protocol("WM_DELETE_WINDOW", self.close)

        self._build_tool_pane().pack(side=tk.TOP, fill=tk.X)
        self.content_display = ChartContentDisplay(self, schedule=self.dispatcher.schedule)
        self.money_display = MoneyPanel(self)

        self._build_footer().pack(side=tk.BOTTOM, fill=tk.X)
        self.money_display.pack(side=tk.RIGHT, fill=tk.Y)
        self.content_display.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

    def _invoke(self, name: CommandName) -> Callable[[], None]:
        return lambda: self.registry.invoke(name)

    def _build_tool_pane(self) -> tk.Frame:
        pane = tk.Frame(
            self,
            background=style.HEADER_COLOR,
            highlightbackground=style.ACCENT_COLOR,
            highlightthickness=1,
            pady=6,
        )
        inner = tk.Frame(pane, background=style.HEADER_COLOR)
        inner.pack()

        self.money_dialog = TkMoneyDialog(inner)
        self.money_dialog.pack(side=tk.LEFT)
        tk.Button(inner, text="⇄", width=3, command=self._invoke(CommandName.SWAP)).pack(side=tk.LEFT, padx=4)
        tk.Label(inner, text="To:", background=style.HEADER_COLOR, foreground="black").pack(side=tk.LEFT)
        self.currency_dialog = TkCurrencyDialog(inner)
        self.currency_dialog.pack(side=tk.LEFT)
        tk.Button(inner, text="Calculate", command=self._invoke(CommandName.EXCHANGE_MONEY)).pack(side=tk.LEFT, padx=4)
        tk.Button(inner, text="ⓘ", width=3, command=self._invoke(CommandName.SHOW_INFO)).pack(
            side=tk.LEFT, padx=(55, 0)
        )
        return pane

    def _build_footer(self) -> tk.Frame:
        footer = tk.Frame(self, background=style.HEADER_COLOR, pady=4)
        tk.Label(
            footer,
            text=f"MONEY CALCULATOR | v{__version__} | Rates: Frankfurter / ECB",
            font=style.FOOTER_FONT,
            background=style.HEADER_COLOR,
            foreground=style.ACCENT_COLOR,
        ).pack()
        return footer

    def on_close(self, callback: Callable[[], None]) -> None:
        """Register cleanup to run before the window is destroyed."""
        self._on_close = callback

    def run(self) -> None:
        self.dispatcher.start()
        self.mainloop()

    def close(self) -> None:
        log.info("Closing main window")
        self.content_display.close()
        if self._on_close is not None:
            self._on_close()
        self.dispatcher.stop()
        self.destroy()
