# src/moneycalc/application/chart_animator.py
"""
Chart Animator - Animated Time-Series Rendering

This module draws a rate history point by point so the line "grows" across
the chart instead of appearing at once. A worker thread walks the sorted
points and hands each append to the UI thread, pausing for the configured
cadence between points.

Only one render is active per animator. Starting a new render cancels the
previous worker and waits for it to exit before the buffer is reset, and
appends that the cancelled worker already queued on the UI thread are
dropped when they run, so a cancelled render never writes after the reset.

Files that USE this module:
- moneycalc.adapters.tk.displays (ChartContentDisplay drives the animator)
- tests.test_chart_animator (unit tests)

Files that this module USES:
- moneycalc.config (settings for animation cadence)
- moneycalc.domain.models (ExchangeRateTimeSeries, ChartSpec)
"""
from __future__ import annotations

import logging
import threading
from enum import Enum
from functools import partial
from typing import Callable, Optional, Protocol

from moneycalc.config import settings
from moneycalc.domain.models import ChartSpec, ExchangeRateTimeSeries

log = logging.getLogger(__name__)

Schedule = Callable[[Callable[[], None]], None]


class AnimationState(str, Enum):
    IDLE = "idle"
    RENDERING = "rendering"


class PointSink(Protocol):
    """The visible point buffer of a chart."""

    def reset(self, chart: ChartSpec) -> None:
        """Remove all points and apply the chart labels."""
        ...

    def add_point(self, day: str, rate: float) -> None:
        ...


def run_inline(fn: Callable[[], None]) -> None:
    fn()


class _RenderTask:
    def __init__(self, chart: ChartSpec, size: int):
        self.chart = chart
        self.size = size
        self.cancelled = threading.Event()
        self.thread: Optional[threading.Thread] = None


class ChartAnimator:
    def __init__(
        self,
        sink: PointSink,
        schedule: Schedule = run_inline,
        interval_seconds: Optional[float] = None,
    ):
        """
        Args:
            sink: Point buffer mutated by the animation
            schedule: Hands a callable to the UI thread; must not block
            interval_seconds: Pause between points (defaults to settings.animation_interval_ms)
        """
        self.sink = sink
        self.schedule = schedule
        self.interval = settings.animation_interval_seconds if interval_seconds is None else interval_seconds
        # Serializes buffer mutations against cancellation
        self._lock = threading.Lock()
        # Last started task, kept after completion so its queued appends can still be revoked
        self._task: Optional[_RenderTask] = None
        self._state = AnimationState.IDLE

    @property
    def state(self) -> AnimationState:
        return self._state

    def render(self, series: ExchangeRateTimeSeries, chart: ChartSpec) -> None:
        """
        Replace whatever is drawn with an animated rendering of ``series``.

        Must be called from the UI thread.
        """
        self.cancel()

        points = series.sorted_points()
        task = _RenderTask(chart, len(points))
        with self._lock:
            self.sink.reset(chart)
            self._task = task
            self._state = AnimationState.RENDERING

        task.thread = threading.Thread(
            target=self._run,
            args=(task, points),
            name="chart-animation",
            daemon=True,
        )
        log.debug("Rendering %s with %d points", chart.title, len(points))
        task.thread.start()

    def cancel(self) -> None:
        """Stop the current render, if any, and wait for its worker to exit."""
        task = self._task
        if task is None:
            return
        task.cancelled.set()
        thread = task.thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        with self._lock:
            if self._task is task:
                self._state = AnimationState.IDLE

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the current worker exits.

        Returns:
            True if no worker is running any more
        """
        task = self._task
        if task is None or task.thread is None:
            return True
        task.thread.join(timeout)
        return not task.thread.is_alive()

    def _run(self, task: _RenderTask, points: list[tuple[str, float]]) -> None:
        appended = 0
        for day, rate in points:
            if task.cancelled.is_set():
                break
            self.schedule(partial(self._append, task, day, rate))
            appended += 1
            # Event.wait doubles as the cadence sleep and returns early on cancel
            if task.cancelled.wait(self.interval):
                break

        with self._lock:
            if self._task is task:
                self._state = AnimationState.IDLE
        if task.cancelled.is_set():
            log.debug("Render of %s cancelled after %d/%d points", task.chart.title, appended, task.size)
        else:
            log.debug("Render of %s finished", task.chart.title)

    def _append(self, task: _RenderTask, day: str, rate: float) -> None:
        with self._lock:
            if task.cancelled.is_set():
                return
            self.sink.add_point(day, rate)
