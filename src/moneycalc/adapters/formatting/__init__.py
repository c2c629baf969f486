# src/moneycalc/adapters/formatting/__init__.py
"""
Formatting Adapters - Display Text

This package contains the money display formatter and the help page loader.
"""

from moneycalc.adapters.formatting.formatter import (
    format_last_update,
    format_result_line,
    format_source_line,
    last_update_date,
)
from moneycalc.adapters.formatting.info_page import html_to_text, load_info_text

__all__ = [
    "format_last_update",
    "format_result_line",
    "format_source_line",
    "last_update_date",
    "html_to_text",
    "load_info_text",
]
