"""
UI Dispatcher Tests - Unit Tests for Tk Main Loop Marshalling

The Tk root is replaced by a Mock; only ``after`` and ``after_cancel`` are
used by the dispatcher.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- moneycalc.adapters.tk.dispatcher (TkUiDispatcher for testing)
- unittest.mock (Mock Tk root)
- pytest (testing framework)
"""
import threading
from unittest.mock import Mock

import pytest  # Testing framework for writing and running tests

pytest.importorskip("tkinter")

from moneycalc.adapters.tk.dispatcher import TkUiDispatcher  # noqa: E402


class TestTkUiDispatcher:
    def test_schedule_only_enqueues(self):
        root = Mock()
        dispatcher = TkUiDispatcher(root, poll_interval_ms=20)
        fn = Mock()

        dispatcher.schedule(fn)

        fn.assert_not_called()
        assert dispatcher.drain_pending() == 1
        fn.assert_called_once_with()

    def test_drain_runs_in_fifo_order(self):
        dispatcher = TkUiDispatcher(Mock(), poll_interval_ms=20)
        seen = []
        for i in range(3):
            dispatcher.schedule(lambda i=i: seen.append(i))

        dispatcher.drain_pending()

        assert seen == [0, 1, 2]

    def test_schedule_from_worker_thread(self):
        dispatcher = TkUiDispatcher(Mock(), poll_interval_ms=20)
        seen = []
        worker = threading.Thread(target=lambda: dispatcher.schedule(lambda: seen.append(threading.current_thread())))
        worker.start()
        worker.join()

        dispatcher.drain_pending()

        assert seen == [threading.current_thread()]

    def test_failing_callback_does_not_stop_drain(self):
        dispatcher = TkUiDispatcher(Mock(), poll_interval_ms=20)
        after = Mock()
        dispatcher.schedule(Mock(side_effect=RuntimeError("boom")))
        dispatcher.schedule(after)

        assert dispatcher.drain_pending() == 2
        after.assert_called_once_with()

    def test_start_and_stop_polling(self):
        root = Mock()
        root.after.return_value = "after#1"
        dispatcher = TkUiDispatcher(root, poll_interval_ms=20)

        dispatcher.start()
        root.after.assert_called_once_with(20, dispatcher._drain)

        dispatcher.start()
        assert root.after.call_count == 1

        dispatcher.stop()
        root.after_cancel.assert_called_once_with("after#1")
