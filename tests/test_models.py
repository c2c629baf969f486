"""
Domain Model Tests - Unit Tests for Value Objects

This module contains unit tests for Currency, Money, the time series and
ChartSpec, including the code-only equality of currencies.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- moneycalc.domain.models (domain models to test)
- pytest (testing framework)
"""
import dataclasses

import pytest  # Testing framework for writing and running tests

from moneycalc.domain.models import (
    ChartSpec,
    Currency,
    ExchangeRateTimeSeries,
    Money,
)

EUR = Currency("EUR", "Euro")
USD = Currency("USD", "United States Dollar")


class TestCurrency:
    def test_equality_ignores_name(self):
        assert Currency("EUR", "Euro") == Currency("EUR", "European currency")
        assert Currency("EUR", "Euro") == Currency("EUR", "")

    def test_different_codes_are_not_equal(self):
        assert Currency("EUR", "Euro") != Currency("USD", "Euro")

    def test_hash_follows_code(self):
        assert len({Currency("EUR", "Euro"), Currency("EUR", "Other")}) == 1

    def test_not_equal_to_plain_string(self):
        assert EUR != "EUR"

    def test_str_is_selector_label(self):
        assert str(EUR) == "EUR-Euro"

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            EUR.code = "USD"


class TestMoney:
    def test_str(self):
        assert str(Money(100.0, EUR)) == "100.0 EUR-Euro"


class TestExchangeRateTimeSeries:
    def test_sorted_points(self):
        series = ExchangeRateTimeSeries(
            EUR, USD, {"2024-01-03": 1.2, "2024-01-01": 1.0, "2024-01-02": 1.1}
        )
        assert series.sorted_points() == [
            ("2024-01-01", 1.0),
            ("2024-01-02", 1.1),
            ("2024-01-03", 1.2),
        ]
        assert len(series) == 3

    def test_rates_are_read_only(self):
        source = {"2024-01-01": 1.0}
        series = ExchangeRateTimeSeries(EUR, USD, source)
        with pytest.raises(TypeError):
            series.rates["2024-01-02"] = 2.0

        # Later changes to the input dict do not leak in
        source["2024-01-02"] = 2.0
        assert len(series) == 1


class TestChartSpec:
    def test_for_pair(self):
        spec = ChartSpec.for_pair(EUR, USD)
        assert spec == ChartSpec(title="EUR/USD", x_axis_label="Date", y_axis_label="Rate")
