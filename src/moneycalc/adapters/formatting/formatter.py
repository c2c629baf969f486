# src/moneycalc/adapters/formatting/formatter.py
"""
Display Formatter - Text for the Money Display

This module builds the three lines of the money display: the source amount,
the converted amount and the "last update" stamp telling the user which
daily publication the rate comes from.

Files that USE this module:
- moneycalc.adapters.tk.displays (MoneyPanel renders these lines)
- tests.test_formatter (unit tests)

Files that this module USES:
- moneycalc.domain.models (Money)
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from moneycalc.domain.models import Money


def _fmt_amount(amount: float, decimals: int) -> str:
    """
    Format an amount with at most ``decimals`` decimal places.

    Trailing zeros are dropped but one decimal is kept, so 100 shows as
    '100.0' and 112.345678 as '112.3457' (decimals=4).
    """
    if decimals <= 0:
        return f"{amount:.0f}"
    text = f"{amount:.{decimals}f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


def format_source_line(source: Money, decimals: int = 4) -> str:
    """'<amount> <CODE> =' for the amount being converted."""
    return f"{_fmt_amount(source.amount, decimals)} {source.currency.code} ="


def format_result_line(result: Money, decimals: int = 4) -> str:
    """'<amount> <CODE>' for the converted amount."""
    return f"{_fmt_amount(result.amount, decimals)} {result.currency.code}"


def last_update_date(now: datetime, cutoff: time) -> date:
    """
    Date of the most recent daily publication.

    Before the cutoff the provider has not published today's rates yet, so
    the previous day is reported.

    Args:
        now: Current local time
        cutoff: Daily publication time

    Returns:
        Yesterday's date before the cutoff, today's date from the cutoff on
    """
    if now.time() < cutoff:
        return now.date() - timedelta(days=1)
    return now.date()


def format_last_update(cutoff: time, now: Optional[datetime] = None) -> str:
    """
    Format the last-update line.

    Returns:
        String like 'Last update: 2024-01-02, 16:00'
    """
    now = now or datetime.now()
    day = last_update_date(now, cutoff)
    return f"Last update: {day.isoformat()}, {cutoff.strftime('%H:%M')}"
