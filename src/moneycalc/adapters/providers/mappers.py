# src/moneycalc/adapters/providers/mappers.py
"""
Response Mappers - JSON to Domain Models

This module parses the raw JSON bodies returned by the Frankfurter API into
domain models. Every mapper is all-or-nothing: a missing field anywhere
raises MalformedResponseError and no partial result is returned.

Expected shapes:
- currencies:  {"EUR": "Euro", "USD": "United States Dollar", ...}
- latest:      {"date": "2024-01-02", "rates": {"USD": 1.1}, ...}
- time series: {"rates": {"2024-01-01": {"USD": 1.05}, ...}, ...}

Files that USE this module:
- moneycalc.adapters.providers.frankfurter (loaders parse responses with these mappers)
- tests.test_mappers (unit tests)

Files that this module USES:
- moneycalc.domain.models (Currency, ExchangeRate, ExchangeRateTimeSeries)
- moneycalc.domain.errors (MalformedResponseError)
"""
from __future__ import annotations

import json
import logging
from typing import Any

from moneycalc.domain.errors import MalformedResponseError
from moneycalc.domain.models import Currency, ExchangeRate, ExchangeRateTimeSeries

log = logging.getLogger(__name__)


def _load_object(raw: str, what: str) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        log.error("%s response is not valid JSON: %s", what, e)
        raise MalformedResponseError(f"{what} response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        log.error("%s response is not a JSON object: %r", what, data)
        raise MalformedResponseError(f"{what} response is not a JSON object")
    return data


def _to_rate(value: Any, what: str) -> float:
    # bool is an int subclass but never a rate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedResponseError(f"{what} is not a number: {value!r}")
    return float(value)


def parse_currencies(raw: str) -> list[Currency]:
    """
    Parse the currency list response.

    Args:
        raw: JSON object mapping currency code to display name

    Returns:
        Currencies in the order the provider listed them

    Raises:
        MalformedResponseError: If the body is not a JSON object or a name is not a string
    """
    data = _load_object(raw, "Currency list")
    currencies = []
    for code, name in data.items():
        if not isinstance(name, str):
            raise MalformedResponseError(f"Currency name for {code} is not a string: {name!r}")
        currencies.append(Currency(code, name))
    return currencies


def parse_latest_rate(raw: str, from_currency: Currency, to_currency: Currency) -> ExchangeRate:
    """
    Parse the latest-rate response for one target currency.

    Raises:
        MalformedResponseError: If 'date' or 'rates', or the target code within 'rates', is missing
    """
    data = _load_object(raw, "Latest rate")
    rates = data.get("rates")
    if not isinstance(rates, dict):
        raise MalformedResponseError("Latest rate response missing 'rates' object")
    if to_currency.code not in rates:
        log.error("Latest rate response has no rate for %s: %s", to_currency.code, data)
        raise MalformedResponseError(f"Latest rate response missing 'rates.{to_currency.code}'")
    if "date" not in data:
        raise MalformedResponseError("Latest rate response missing 'date' field")

    return ExchangeRate(
        from_currency=from_currency,
        to_currency=to_currency,
        date=str(data["date"]),
        rate=_to_rate(rates[to_currency.code], f"Rate for {to_currency.code}"),
    )


def parse_time_series(raw: str, from_currency: Currency, to_currency: Currency) -> ExchangeRateTimeSeries:
    """
    Parse the historical range response.

    Raises:
        MalformedResponseError: If 'rates' is missing or any day lacks the target rate
    """
    data = _load_object(raw, "Time series")
    days = data.get("rates")
    if not isinstance(days, dict):
        raise MalformedResponseError("Time series response missing 'rates' object")

    rates: dict[str, float] = {}
    for day, values in days.items():
        if not isinstance(values, dict) or to_currency.code not in values:
            log.error("Time series day %s has no rate for %s", day, to_currency.code)
            raise MalformedResponseError(f"Time series day {day} missing rate for {to_currency.code}")
        rates[day] = _to_rate(values[to_currency.code], f"Rate for {to_currency.code} on {day}")

    return ExchangeRateTimeSeries(from_currency, to_currency, rates)
