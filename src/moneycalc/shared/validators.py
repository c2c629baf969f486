# src/moneycalc/shared/validators.py
"""
Input Validation Utilities - User and Configuration Input

This module provides validation helpers for the amount typed by the user
and for configuration values such as the API base URL and the publication
cutoff time.

Files that USE this module:
- moneycalc.config.settings (uses validation functions in Settings field validators)
- moneycalc.adapters.tk.dialogs (parse_amount for the amount entry)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from datetime import time
from typing import Optional


def validate_api_base_url(url: str) -> bool:
    """
    Validate the REST API base URL.

    Args:
        url: URL to validate

    Returns:
        True if the URL is an absolute http(s) URL with a host, False otherwise
    """
    if not url:
        return False
    return bool(re.match(r'^https?://[^\s/]+(/\S*)?$', url))


def parse_cutoff(value: str) -> Optional[time]:
    """
    Parse an ``HH:MM`` time of day.

    Args:
        value: Text such as '16:00'

    Returns:
        datetime.time instance, or None if the text is not a valid time
    """
    match = re.match(r'^(\d{1,2}):(\d{2})$', value.strip()) if value else None
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def validate_numeric_input(value: str, min_val: Optional[float] = None,
                           max_val: Optional[float] = None) -> bool:
    """
    Validate numeric input string.

    Args:
        value: String value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False

    try:
        num_val = float(value)
    except ValueError:
        return False
    if not math.isfinite(num_val):
        return False
    if min_val is not None and num_val < min_val:
        return False
    if max_val is not None and num_val > max_val:
        return False
    return True


def parse_amount(text: str) -> float:
    """
    Read the amount typed in the money dialog.

    Unparseable text reads as 0.0; the sign is not checked here because the
    exchange service rejects negative amounts itself.

    Args:
        text: Raw entry text

    Returns:
        Parsed amount
    """
    cleaned = (text or "").strip().replace(",", "")
    if not validate_numeric_input(cleaned):
        return 0.0
    return float(cleaned)
