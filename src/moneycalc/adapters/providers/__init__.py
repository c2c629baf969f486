# src/moneycalc/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains the HTTP fetcher, the JSON mappers and the
Frankfurter loaders built on them.
"""

from moneycalc.adapters.providers.base import (
    CurrencyLoader,
    ExchangeRateLoader,
    JsonFetcher,
    TimeSeriesLoader,
)
from moneycalc.adapters.providers.frankfurter import (
    FrankfurterCurrencyLoader,
    FrankfurterExchangeRateLoader,
    FrankfurterTimeSeriesLoader,
)
from moneycalc.adapters.providers.http import RequestsJsonFetcher

__all__ = [
    "JsonFetcher",
    "CurrencyLoader",
    "ExchangeRateLoader",
    "TimeSeriesLoader",
    "RequestsJsonFetcher",
    "FrankfurterCurrencyLoader",
    "FrankfurterExchangeRateLoader",
    "FrankfurterTimeSeriesLoader",
]
