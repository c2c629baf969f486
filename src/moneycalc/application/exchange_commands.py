# src/moneycalc/application/exchange_commands.py
"""
Exchange Commands - Actions Behind the Tool Bar Buttons

This module contains the commands registered under "exchange money", "swap"
and "show info". ExchangeMoneyCommand is the single place that turns errors
into messages for the user; lower layers only raise.

Files that USE this module:
- moneycalc.app (creates and registers the commands)
- tests.test_exchange_commands (unit tests)

Files that this module USES:
- moneycalc.application.commands (CommandRegistry, CommandName)
- moneycalc.application.exchange_service (ExchangeService, validate_exchange)
- moneycalc.application.task_runner (TaskRunner for background fetches)
- moneycalc.application.views (dialog and display protocols)
- moneycalc.domain.errors (error taxonomy)
"""
from __future__ import annotations

import logging
from typing import Optional

from moneycalc.application.commands import CommandName, CommandRegistry
from moneycalc.application.exchange_service import ExchangeResult, ExchangeService, validate_exchange
from moneycalc.application.task_runner import InlineTaskRunner, TaskRunner
from moneycalc.application.views import (
    ContentDisplay,
    CurrencyDialog,
    ErrorReporter,
    MoneyDialog,
    MoneyDisplay,
)
from moneycalc.domain.errors import (
    InvalidExchangeInputError,
    MalformedResponseError,
    RemoteFetchError,
)

log = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Please insert valid data."
FETCH_FAILED_MESSAGE = "Could not reach the exchange rate service. Please try again later."
MALFORMED_MESSAGE = "The exchange rate service returned unexpected data."
UNEXPECTED_MESSAGE = "Something went wrong while exchanging money."


def error_message_for(error: Exception) -> str:
    """Map an exchange failure to the text shown to the user."""
    if isinstance(error, InvalidExchangeInputError):
        return INVALID_INPUT_MESSAGE
    if isinstance(error, RemoteFetchError):
        return FETCH_FAILED_MESSAGE
    if isinstance(error, MalformedResponseError):
        return MALFORMED_MESSAGE
    return UNEXPECTED_MESSAGE


class ExchangeMoneyCommand:
    """
    Reads the dialogs, converts the amount and refreshes both displays.

    The chart is refreshed before the money display. On failure nothing is
    rolled back: whatever the displays showed before stays visible.
    """

    def __init__(
        self,
        money_dialog: MoneyDialog,
        currency_dialog: CurrencyDialog,
        service: ExchangeService,
        money_display: MoneyDisplay,
        content_display: ContentDisplay,
        error_reporter: ErrorReporter,
        runner: Optional[TaskRunner] = None,
    ):
        self.money_dialog = money_dialog
        self.currency_dialog = currency_dialog
        self.service = service
        self.money_display = money_display
        self.content_display = content_display
        self.error_reporter = error_reporter
        self.runner = runner or InlineTaskRunner()

    def execute(self) -> None:
        source = self.money_dialog.get()
        target = self.currency_dialog.get()

        # Reject bad input here, before anything is handed to the runner
        try:
            validate_exchange(source, target)
        except InvalidExchangeInputError as e:
            self._on_error(e)
            return

        self.runner.submit(
            lambda: self.service.exchange(source, target),
            self._on_success,
            self._on_error,
        )

    def _on_success(self, outcome: ExchangeResult) -> None:
        self.content_display.show_chart(outcome.chart, outcome.series)
        self.money_display.show(outcome.source, outcome.result)

    def _on_error(self, error: Exception) -> None:
        if isinstance(error, InvalidExchangeInputError):
            log.warning("Rejected exchange input: %s", error)
        elif isinstance(error, (RemoteFetchError, MalformedResponseError)):
            log.error("Exchange failed: %s", error)
        else:
            log.error("Unexpected exchange failure", exc_info=error)
        self.error_reporter.show_error(error_message_for(error), "Error")


class SwapCurrenciesCommand:
    """
    Swaps the selected positions of the source and target selectors and
    re-runs the exchange.

    Positions are swapped, not currencies: with differently ordered lists the
    selectors end up on whatever sits at the other's former index.
    """

    def __init__(self, registry: CommandRegistry, money_dialog: MoneyDialog, currency_dialog: CurrencyDialog):
        self.registry = registry
        self.money_dialog = money_dialog
        self.currency_dialog = currency_dialog

    def execute(self) -> None:
        source_index = self.money_dialog.get_selected_index()
        self.money_dialog.set_selected_index(self.currency_dialog.get_selected_index())
        self.currency_dialog.set_selected_index(source_index)
        self.registry.invoke(CommandName.EXCHANGE_MONEY)


class ShowInfoCommand:
    def __init__(self, content_display: ContentDisplay):
        self.content_display = content_display

    def execute(self) -> None:
        self.content_display.show_info()
