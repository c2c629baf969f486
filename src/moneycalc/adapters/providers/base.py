# src/moneycalc/adapters/providers/base.py
"""
Base Provider Interfaces for Remote Exchange Data

This module defines the abstract base classes for the HTTP fetcher and the
loaders that turn remote responses into domain models.

Files that USE this module:
- moneycalc.adapters.providers.http (RequestsJsonFetcher implements JsonFetcher)
- moneycalc.adapters.providers.frankfurter (Frankfurter loaders implement the loader interfaces)
- moneycalc.application.exchange_service (depends on the loader interfaces)

Files that this module USES:
- moneycalc.domain.models (return types)
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from moneycalc.domain.models import Currency, ExchangeRate, ExchangeRateTimeSeries


class JsonFetcher(ABC):
    @abstractmethod
    def fetch(self, url: str) -> str:
        """Return the raw JSON body of a GET request to ``url``."""
        raise NotImplementedError


class CurrencyLoader(ABC):
    @abstractmethod
    def load(self) -> list[Currency]:
        """Return the currencies offered by the provider, in provider order."""
        raise NotImplementedError


class ExchangeRateLoader(ABC):
    @abstractmethod
    def load(self, from_currency: Currency, to_currency: Currency) -> ExchangeRate:
        """Return the latest rate converting ``from_currency`` into ``to_currency``."""
        raise NotImplementedError


class TimeSeriesLoader(ABC):
    @abstractmethod
    def load(
        self,
        from_currency: Currency,
        to_currency: Currency,
        today: Optional[date] = None,
    ) -> ExchangeRateTimeSeries:
        """Return the rate history for the lookback window ending ``today``."""
        raise NotImplementedError
