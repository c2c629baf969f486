# src/moneycalc/application/exchange_service.py
"""
Exchange Service - Money Conversion Business Logic

This module validates an exchange request, fetches the latest rate, converts
the amount and fetches the rate history the chart is drawn from. It has no
UI dependencies; the exchange command decides how results and errors are
shown.

Files that USE this module:
- moneycalc.application.exchange_commands (ExchangeMoneyCommand runs ExchangeService.exchange)
- tests.test_exchange_service (unit tests)

Files that this module USES:
- moneycalc.adapters.providers.base (ExchangeRateLoader, TimeSeriesLoader interfaces)
- moneycalc.domain.models (Money, Currency, ChartSpec, ...)
- moneycalc.domain.errors (InvalidExchangeInputError)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from moneycalc.adapters.providers.base import ExchangeRateLoader, TimeSeriesLoader
from moneycalc.domain.errors import InvalidExchangeInputError
from moneycalc.domain.models import (
    ChartSpec,
    Currency,
    ExchangeRate,
    ExchangeRateTimeSeries,
    Money,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExchangeResult:
    """Everything the displays need after a successful exchange."""
    source: Money
    result: Money
    rate: ExchangeRate
    series: ExchangeRateTimeSeries
    chart: ChartSpec


def validate_exchange(source: Money, target: Currency) -> None:
    """
    Check that an exchange request makes sense.

    Raises:
        InvalidExchangeInputError: If both currencies are the same or the amount is negative
    """
    if source.currency == target:
        raise InvalidExchangeInputError(f"Cannot exchange {source.currency.code} into itself")
    # NaN fails this comparison too
    if not source.amount >= 0:
        raise InvalidExchangeInputError(f"Amount must not be negative: {source.amount}")


def convert(source: Money, rate: ExchangeRate) -> Money:
    """Apply ``rate`` to ``source``; the result is in the rate's target currency."""
    return Money(source.amount * rate.rate, rate.to_currency)


class ExchangeService:
    def __init__(self, rate_loader: ExchangeRateLoader, series_loader: TimeSeriesLoader):
        self.rate_loader = rate_loader
        self.series_loader = series_loader

    def exchange(self, source: Money, target: Currency) -> ExchangeResult:
        """
        Convert ``source`` into ``target`` and load the chart data.

        Validation happens before any request is made. Requests run in order:
        latest rate, then history.

        Raises:
            InvalidExchangeInputError: On same-currency or negative-amount input
            RemoteFetchError: If a request fails
            MalformedResponseError: If a response cannot be mapped
        """
        validate_exchange(source, target)

        rate = self.rate_loader.load(source.currency, target)
        result = convert(source, rate)
        series = self.series_loader.load(source.currency, target)

        log.info("Exchanged %s %s -> %s %s", source.amount, source.currency.code, result.amount, target.code)
        return ExchangeResult(
            source=source,
            result=result,
            rate=rate,
            series=series,
            chart=ChartSpec.for_pair(source.currency, target),
        )
