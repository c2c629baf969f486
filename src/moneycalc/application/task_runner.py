# src/moneycalc/application/task_runner.py
"""
Task Runners - Running Blocking Work Off the UI Thread

The exchange command submits its network work to a runner together with a
success and an error callback. ThreadedTaskRunner runs the work on a worker
thread and marshals the callbacks back onto the UI thread; InlineTaskRunner
runs everything on the calling thread (tests, scripts).

Files that USE this module:
- moneycalc.app (creates a ThreadedTaskRunner for the Tk shell)
- moneycalc.application.exchange_commands (ExchangeMoneyCommand submits work)

Files that this module USES:
- None (standard library only)
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, Protocol, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")

Schedule = Callable[[Callable[[], None]], None]


class TaskRunner(Protocol):
    def submit(
        self,
        work: Callable[[], T],
        on_success: Callable[[T], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        ...


class InlineTaskRunner:
    """Runs work and its callback synchronously on the calling thread."""

    def submit(
        self,
        work: Callable[[], T],
        on_success: Callable[[T], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        try:
            result = work()
        except Exception as e:
            on_error(e)
            return
        on_success(result)


class ThreadedTaskRunner:
    """
    Runs work on a background executor; callbacks are handed to ``schedule``
    so they execute on the UI thread.
    """

    def __init__(self, schedule: Schedule, executor: Optional[ThreadPoolExecutor] = None):
        self.schedule = schedule
        self.executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="moneycalc-fetch")

    def submit(
        self,
        work: Callable[[], T],
        on_success: Callable[[T], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        def _done(future: Future) -> None:
            error = future.exception()
            if error is not None:
                self.schedule(lambda: on_error(error))
            else:
                result = future.result()
                self.schedule(lambda: on_success(result))

        self.executor.submit(work).add_done_callback(_done)

    def shutdown(self) -> None:
        log.debug("Shutting down fetch executor")
        self.executor.shutdown(wait=False, cancel_futures=True)
