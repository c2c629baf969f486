# src/moneycalc/app.py
"""
Application Entry Point - Window Initialization and Startup

This module serves as the composition root for the money calculator.
It wires loaders, services and commands into the Tk window and starts the
main loop.

Files that USE this module:
- python -m moneycalc (module entry point)
- the ``moneycalc`` console script

Files that this module USES:
- moneycalc.shared.logging_conf (setup_logging for logging configuration)
- moneycalc.config (settings for configuration management)
- moneycalc.adapters.providers (fetcher and Frankfurter loaders)
- moneycalc.application (command registry, exchange service, commands, task runner)
- moneycalc.adapters.tk.main_frame (MainFrame window)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes

from moneycalc.shared.logging_conf import setup_logging  # Configure logging with file rotation
from moneycalc.config import settings  # Application configuration and settings
from moneycalc.adapters.providers import (
    FrankfurterCurrencyLoader,  # Currency list for the selectors
    FrankfurterExchangeRateLoader,  # Latest rate for a pair
    FrankfurterTimeSeriesLoader,  # One-year history for the chart
    RequestsJsonFetcher,  # Shared HTTP client
)
from moneycalc.application.commands import CommandName, CommandRegistry
from moneycalc.application.exchange_commands import (
    ExchangeMoneyCommand,
    ShowInfoCommand,
    SwapCurrenciesCommand,
)
from moneycalc.application.exchange_service import ExchangeService
from moneycalc.application.task_runner import ThreadedTaskRunner
from moneycalc.domain.errors import MalformedResponseError, RemoteFetchError


def main() -> None:
    """
    Initialize and start the money calculator window.

    This function:
    1. Sets up logging from settings
    2. Creates the main window and loads the currency list
    3. Registers the "exchange money", "swap" and "show info" commands
    4. Shows the help page and starts the Tk main loop
    """
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)
    logger.info("Using exchange rate API at %s", settings.api_base_url)

    # Tk is imported lazily so the rest of the package works on headless builds
    from moneycalc.adapters.tk.displays import TkErrorReporter
    from moneycalc.adapters.tk.main_frame import MainFrame

    registry = CommandRegistry()
    frame = MainFrame(registry)
    error_reporter = TkErrorReporter(parent=frame)

    fetcher = RequestsJsonFetcher()
    try:
        currencies = FrankfurterCurrencyLoader(fetcher).load()
    except (RemoteFetchError, MalformedResponseError) as e:
        logger.error("Could not load the currency list: %s", e)
        error_reporter.show_error(f"Could not load the currency list.\n{e}", "Error")
        frame.destroy()
        sys.exit(1)

    frame.money_dialog.define(currencies)
    # Start on a valid pair rather than the same currency twice
    frame.currency_dialog.define(currencies, selected=1)

    runner = ThreadedTaskRunner(frame.dispatcher.schedule)
    frame.on_close(runner.shutdown)

    service = ExchangeService(
        FrankfurterExchangeRateLoader(fetcher),
        FrankfurterTimeSeriesLoader(fetcher),
    )
    registry.register(
        CommandName.EXCHANGE_MONEY,
        ExchangeMoneyCommand(
            money_dialog=frame.money_dialog,
            currency_dialog=frame.currency_dialog,
            service=service,
            money_display=frame.money_display,
            content_display=frame.content_display,
            error_reporter=error_reporter,
            runner=runner,
        ),
    )
    registry.register(CommandName.SWAP, SwapCurrenciesCommand(registry, frame.money_dialog, frame.currency_dialog))
    registry.register(CommandName.SHOW_INFO, ShowInfoCommand(frame.content_display))

    registry.invoke(CommandName.SHOW_INFO)

    logger.info("Starting main loop with %d currencies", len(currencies))
    try:
        frame.run()
    except KeyboardInterrupt:
        logger.info("Stopped by user (KeyboardInterrupt)")
        raise


if __name__ == "__main__":
    main()
