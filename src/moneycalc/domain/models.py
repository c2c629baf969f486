# src/moneycalc/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the value objects exchanged between the layers:
- Currencies and amounts of money
- Latest exchange rates and historical rate series
- Chart descriptions

Files that USE this module:
- moneycalc.adapters.providers.* (mappers and loaders build domain models)
- moneycalc.application.* (services and commands operate on domain models)
- moneycalc.adapters.tk.* (dialogs and displays show domain models)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from types import MappingProxyType  # Read-only view over the rates mapping
from typing import Mapping


@dataclass(frozen=True)
class Currency:
    """
    A currency identified by its ISO code.

    Equality and hashing use the code only, so ``Currency("EUR", "Euro")``
    equals ``Currency("EUR", "")``.
    """
    code: str
    name: str = field(default="", compare=False)

    def __str__(self) -> str:
        return f"{self.code}-{self.name}"


@dataclass(frozen=True)
class Money:
    """An amount expressed in a currency."""
    amount: float
    currency: Currency

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


@dataclass(frozen=True)
class ExchangeRate:
    """
    Latest exchange rate between two currencies.

    Attributes:
        from_currency: Currency being converted
        to_currency: Currency converted into
        date: Publication date reported by the provider
        rate: Units of ``to_currency`` for one unit of ``from_currency``
    """
    from_currency: Currency
    to_currency: Currency
    date: str
    rate: float


@dataclass(frozen=True)
class ExchangeRateTimeSeries:
    """
    Historical rates for a currency pair keyed by ``YYYY-MM-DD`` date.

    The mapping order is not meaningful; use ``sorted_points`` for
    chronological order.
    """
    from_currency: Currency
    to_currency: Currency
    rates: Mapping[str, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def sorted_points(self) -> list[tuple[str, float]]:
        # ISO dates sort chronologically as strings
        return sorted(self.rates.items())

    def __len__(self) -> int:
        return len(self.rates)


@dataclass(frozen=True)
class ChartSpec:
    """Descriptive labels for a time-series chart."""
    title: str
    x_axis_label: str
    y_axis_label: str

    @classmethod
    def for_pair(cls, from_currency: Currency, to_currency: Currency) -> ChartSpec:
        return cls(
            title=f"{from_currency.code}/{to_currency.code}",
            x_axis_label="Date",
            y_axis_label="Rate",
        )
