# src/moneycalc/adapters/providers/frankfurter.py
"""
Frankfurter API Loaders

This module implements the loaders for the Frankfurter exchange rate API
(https://frankfurter.dev): the currency list, the latest rate for a pair,
and the rate history over the configured lookback window.

Files that USE this module:
- moneycalc.app (composition root creates the loaders)
- tests.test_providers (unit tests)

Files that this module USES:
- moneycalc.adapters.providers.base (loader interfaces and JsonFetcher)
- moneycalc.adapters.providers.mappers (JSON parsing)
- moneycalc.config (settings for base URL and lookback window)
"""
import logging
import urllib.parse
from datetime import date, timedelta
from typing import Optional

from moneycalc.adapters.providers.base import (
    CurrencyLoader,
    ExchangeRateLoader,
    JsonFetcher,
    TimeSeriesLoader,
)
from moneycalc.adapters.providers.mappers import (
    parse_currencies,
    parse_latest_rate,
    parse_time_series,
)
from moneycalc.config import settings
from moneycalc.domain.models import Currency, ExchangeRate, ExchangeRateTimeSeries

log = logging.getLogger(__name__)


def _pair_query(from_currency: Currency, to_currency: Currency) -> str:
    return urllib.parse.urlencode({"symbols": to_currency.code, "base": from_currency.code})


class FrankfurterCurrencyLoader(CurrencyLoader):
    def __init__(self, fetcher: JsonFetcher, base_url: Optional[str] = None):
        self.fetcher = fetcher
        self.base_url = (base_url or settings.api_base_url).rstrip("/")

    def load(self) -> list[Currency]:
        url = f"{self.base_url}/currencies"
        currencies = parse_currencies(self.fetcher.fetch(url))
        log.info("Loaded %d currencies from Frankfurter", len(currencies))
        return currencies


class FrankfurterExchangeRateLoader(ExchangeRateLoader):
    def __init__(self, fetcher: JsonFetcher, base_url: Optional[str] = None):
        self.fetcher = fetcher
        self.base_url = (base_url or settings.api_base_url).rstrip("/")

    def load(self, from_currency: Currency, to_currency: Currency) -> ExchangeRate:
        url = f"{self.base_url}/latest?{_pair_query(from_currency, to_currency)}"
        rate = parse_latest_rate(self.fetcher.fetch(url), from_currency, to_currency)
        log.info(
            "Latest %s/%s rate=%s (date=%s)",
            from_currency.code, to_currency.code, rate.rate, rate.date,
        )
        return rate


class FrankfurterTimeSeriesLoader(TimeSeriesLoader):
    """
    Loads the rate history from ``today - lookback_days`` up to the latest
    published day (open-ended ``{start}..`` range).
    """

    def __init__(
        self,
        fetcher: JsonFetcher,
        base_url: Optional[str] = None,
        lookback_days: Optional[int] = None,
    ):
        self.fetcher = fetcher
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.lookback_days = lookback_days or settings.lookback_days

    def start_date(self, today: Optional[date] = None) -> date:
        """First day of the lookback window."""
        return (today or date.today()) - timedelta(days=self.lookback_days)

    def load(
        self,
        from_currency: Currency,
        to_currency: Currency,
        today: Optional[date] = None,
    ) -> ExchangeRateTimeSeries:
        start = self.start_date(today).isoformat()
        url = f"{self.base_url}/{start}..?{_pair_query(from_currency, to_currency)}"
        series = parse_time_series(self.fetcher.fetch(url), from_currency, to_currency)
        log.info(
            "Loaded %d historical %s/%s rates since %s",
            len(series), from_currency.code, to_currency.code, start,
        )
        return series
