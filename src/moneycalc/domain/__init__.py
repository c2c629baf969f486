# src/moneycalc/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and the error taxonomy.
No dependencies on infrastructure or external systems.
"""

from moneycalc.domain.models import (
    ChartSpec,
    Currency,
    ExchangeRate,
    ExchangeRateTimeSeries,
    Money,
)
from moneycalc.domain.errors import (
    InvalidExchangeInputError,
    MalformedResponseError,
    MoneyCalcError,
    RemoteFetchError,
    UnknownCommandError,
)

__all__ = [
    "Currency",
    "Money",
    "ExchangeRate",
    "ExchangeRateTimeSeries",
    "ChartSpec",
    "MoneyCalcError",
    "RemoteFetchError",
    "MalformedResponseError",
    "InvalidExchangeInputError",
    "UnknownCommandError",
]
