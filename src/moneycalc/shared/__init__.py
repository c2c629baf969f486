# src/moneycalc/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from moneycalc.shared.validators import (
    parse_amount,
    parse_cutoff,
    validate_api_base_url,
    validate_numeric_input,
)

__all__ = [
    "parse_amount",
    "parse_cutoff",
    "validate_api_base_url",
    "validate_numeric_input",
]
