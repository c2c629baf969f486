# src/moneycalc/adapters/tk/dispatcher.py
"""
UI Dispatcher - Marshalling Work Onto the Tk Main Loop

Tk widgets may only be touched from the thread running the main loop.
Worker threads (fetches, chart animation) hand callables to ``schedule``,
which only enqueues; the main loop drains the queue every poll interval.

Files that USE this module:
- moneycalc.app (creates the dispatcher and starts polling)
- moneycalc.adapters.tk.main_frame (passes ``schedule`` to the chart display)

Files that this module USES:
- moneycalc.config (settings for the poll interval)
"""
from __future__ import annotations

import logging
import queue
import tkinter as tk
from typing import Callable, Optional

from moneycalc.config import settings

log = logging.getLogger(__name__)


class TkUiDispatcher:
    def __init__(self, root: tk.Misc, poll_interval_ms: Optional[int] = None):
        self.root = root
        self.poll_interval_ms = poll_interval_ms or settings.ui_poll_interval_ms
        self._queue: "queue.SimpleQueue[Callable[[], None]]" = queue.SimpleQueue()
        self._after_id: Optional[str] = None

    def schedule(self, fn: Callable[[], None]) -> None:
        """Queue ``fn`` to run on the Tk thread. Safe to call from any thread."""
        self._queue.put(fn)

    def start(self) -> None:
        if self._after_id is None:
            self._drain()

    def stop(self) -> None:
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None

    def drain_pending(self) -> int:
        """Run every queued callable now; returns how many ran."""
        count = 0
        while True:
            try:
                fn = self._queue.get_nowait()
            except queue.Empty:
                return count
            count += 1
            try:
                fn()
            except Exception:
                # Same policy as Tk's own callback handler: report and keep the loop alive
                log.exception("UI callback failed")

    def _drain(self) -> None:
        self.drain_pending()
        self._after_id = self.root.after(self.poll_interval_ms, self._drain)
