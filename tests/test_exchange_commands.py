"""
Exchange Command Tests - Unit Tests for the UI Commands

This module contains unit tests for ExchangeMoneyCommand (display updates,
user-facing error messages), SwapCurrenciesCommand (index swap and
re-invocation through the registry), ShowInfoCommand and the task runners.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- moneycalc.application.exchange_commands (commands to test)
- moneycalc.application.task_runner (InlineTaskRunner, ThreadedTaskRunner)
- moneycalc.application.commands (CommandRegistry)
- unittest.mock (Mock views and services)
- pytest (testing framework)
"""
import threading
from unittest.mock import Mock, call

import pytest  # Testing framework for writing and running tests

from moneycalc.application.commands import CommandName, CommandRegistry
from moneycalc.application.exchange_commands import (
    FETCH_FAILED_MESSAGE,
    INVALID_INPUT_MESSAGE,
    MALFORMED_MESSAGE,
    UNEXPECTED_MESSAGE,
    ExchangeMoneyCommand,
    ShowInfoCommand,
    SwapCurrenciesCommand,
    error_message_for,
)
from moneycalc.application.exchange_service import ExchangeResult, ExchangeService
from moneycalc.application.task_runner import InlineTaskRunner, ThreadedTaskRunner
from moneycalc.domain.errors import (
    InvalidExchangeInputError,
    MalformedResponseError,
    RemoteFetchError,
)
from moneycalc.domain.models import (
    ChartSpec,
    Currency,
    ExchangeRate,
    ExchangeRateTimeSeries,
    Money,
)

EUR = Currency("EUR", "Euro")
USD = Currency("USD", "United States Dollar")
GBP = Currency("GBP", "British Pound")


class FakeSelector:
    """Index-based selector standing in for a currency combobox."""

    def __init__(self, currencies, index=0, amount=0.0):
        self.currencies = list(currencies)
        self.index = index
        self.amount = amount

    def get_selected_index(self):
        return self.index

    def set_selected_index(self, index):
        self.index = index

    def get(self):
        return self.currencies[self.index]


class FakeMoneyDialog(FakeSelector):
    def get(self):
        return Money(self.amount, self.currencies[self.index])


def _build(amount=100.0, source_index=0, target_index=1, service=None):
    currencies = [EUR, USD, GBP]
    money_dialog = FakeMoneyDialog(currencies, index=source_index, amount=amount)
    currency_dialog = FakeSelector(currencies, index=target_index)
    if service is None:
        rate_loader = Mock()
        rate_loader.load.side_effect = lambda f, t: ExchangeRate(f, t, "2024-01-02", 2.0)
        series_loader = Mock()
        series_loader.load.side_effect = lambda f, t: ExchangeRateTimeSeries(f, t, {"2024-01-01": 2.0})
        service = ExchangeService(rate_loader, series_loader)
    views = Mock()
    command = ExchangeMoneyCommand(
        money_dialog=money_dialog,
        currency_dialog=currency_dialog,
        service=service,
        money_display=views.money_display,
        content_display=views.content_display,
        error_reporter=views.error_reporter,
        runner=InlineTaskRunner(),
    )
    return command, views, service


class TestExchangeMoneyCommand:
    def test_success_updates_chart_then_money(self):
        command, views, _ = _build(amount=100.0)

        command.execute()

        chart_call, money_call = views.mock_calls
        assert chart_call == call.content_display.show_chart(
            ChartSpec("EUR/USD", "Date", "Rate"),
            ExchangeRateTimeSeries(EUR, USD, {"2024-01-01": 2.0}),
        )
        assert money_call == call.money_display.show(Money(100.0, EUR), Money(200.0, USD))
        views.error_reporter.show_error.assert_not_called()

    @pytest.mark.parametrize("amount, source_index, target_index", [
        (100.0, 1, 1),
        (-5.0, 0, 1),
    ])
    def test_invalid_input(self, amount, source_index, target_index):
        service = Mock()
        command, views, _ = _build(amount, source_index, target_index, service=service)

        command.execute()

        views.error_reporter.show_error.assert_called_once_with(INVALID_INPUT_MESSAGE, "Error")
        service.exchange.assert_not_called()
        views.content_display.show_chart.assert_not_called()
        views.money_display.show.assert_not_called()

    def test_invalid_input_is_rejected_before_the_runner(self):
        command, views, _ = _build(amount=-1.0)
        command.runner = Mock()

        command.execute()

        command.runner.submit.assert_not_called()
        views.error_reporter.show_error.assert_called_once_with(INVALID_INPUT_MESSAGE, "Error")

    def test_fetch_error_leaves_displays_untouched(self):
        service = Mock()
        service.exchange.side_effect = RemoteFetchError("Error: HTTP 503")
        command, views, _ = _build(service=service)

        command.execute()

        views.error_reporter.show_error.assert_called_once_with(FETCH_FAILED_MESSAGE, "Error")
        views.content_display.show_chart.assert_not_called()
        views.money_display.show.assert_not_called()

    def test_malformed_response_message(self):
        service = Mock()
        service.exchange.side_effect = MalformedResponseError("missing rates.USD")
        command, views, _ = _build(service=service)

        command.execute()

        views.error_reporter.show_error.assert_called_once_with(MALFORMED_MESSAGE, "Error")

    def test_error_message_for(self):
        assert error_message_for(InvalidExchangeInputError()) == "Please insert valid data."
        assert error_message_for(RemoteFetchError()) == FETCH_FAILED_MESSAGE
        assert error_message_for(MalformedResponseError()) == MALFORMED_MESSAGE
        assert error_message_for(KeyError("x")) == UNEXPECTED_MESSAGE


class TestSwapCurrenciesCommand:
    def test_swaps_indices_and_reinvokes_exchange(self):
        registry = CommandRegistry()
        money_dialog = FakeMoneyDialog([EUR, USD, GBP], index=0, amount=1.0)
        currency_dialog = FakeSelector([EUR, USD, GBP], index=2)
        exchange = Mock()
        registry.register(CommandName.EXCHANGE_MONEY, exchange)
        registry.register(CommandName.SWAP, SwapCurrenciesCommand(registry, money_dialog, currency_dialog))

        registry.invoke("swap")

        assert money_dialog.get_selected_index() == 2
        assert currency_dialog.get_selected_index() == 0
        exchange.execute.assert_called_once_with()

    def test_swaps_positions_not_currencies(self):
        registry = CommandRegistry()
        registry.register(CommandName.EXCHANGE_MONEY, Mock())
        # Lists in different order: position 0 of the target list is GBP
        money_dialog = FakeMoneyDialog([EUR, USD, GBP], index=0)
        currency_dialog = FakeSelector([GBP, EUR, USD], index=1)

        SwapCurrenciesCommand(registry, money_dialog, currency_dialog).execute()

        assert money_dialog.get().currency == USD
        assert currency_dialog.get() == GBP

    def test_missing_exchange_command(self):
        registry = CommandRegistry()
        command = SwapCurrenciesCommand(registry, FakeMoneyDialog([EUR, USD]), FakeSelector([EUR, USD], index=1))

        from moneycalc.domain.errors import UnknownCommandError
        with pytest.raises(UnknownCommandError):
            command.execute()


class TestShowInfoCommand:
    def test_shows_info(self):
        content_display = Mock()
        ShowInfoCommand(content_display).execute()
        content_display.show_info.assert_called_once_with()


class TestTaskRunners:
    def test_inline_success(self):
        results = []
        InlineTaskRunner().submit(lambda: 42, results.append, Mock())
        assert results == [42]

    def test_inline_error(self):
        errors = []
        error = RemoteFetchError("down")

        def work():
            raise error

        on_success = Mock()
        InlineTaskRunner().submit(work, on_success, errors.append)

        assert errors == [error]
        on_success.assert_not_called()

    def test_threaded_runs_work_off_thread_and_schedules_callback(self):
        caller = threading.current_thread()
        scheduled = []
        done = threading.Event()
        seen = {}

        def schedule(fn):
            scheduled.append(fn)
            done.set()

        def work():
            seen["thread"] = threading.current_thread()
            return "ok"

        runner = ThreadedTaskRunner(schedule)
        results = []
        runner.submit(work, results.append, Mock())
        assert done.wait(5)
        runner.shutdown()

        assert seen["thread"] is not caller
        # Callback only runs once the UI thread drains the queue
        assert results == []
        scheduled[0]()
        assert results == ["ok"]

    def test_threaded_error_goes_to_error_callback(self):
        done = threading.Event()
        scheduled = []

        def schedule(fn):
            scheduled.append(fn)
            done.set()

        def work():
            raise MalformedResponseError("bad")

        errors = []
        runner = ThreadedTaskRunner(schedule)
        runner.submit(work, Mock(), errors.append)
        assert done.wait(5)
        runner.shutdown()

        scheduled[0]()
        assert len(errors) == 1
        assert isinstance(errors[0], MalformedResponseError)


def test_exchange_result_is_immutable():
    outcome = ExchangeResult(
        source=Money(1.0, EUR),
        result=Money(2.0, USD),
        rate=ExchangeRate(EUR, USD, "2024-01-02", 2.0),
        series=ExchangeRateTimeSeries(EUR, USD, {}),
        chart=ChartSpec.for_pair(EUR, USD),
    )
    with pytest.raises(AttributeError):
        outcome.source = Money(3.0, EUR)
