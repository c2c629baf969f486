# src/moneycalc/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines the exceptions raised by the money calculator layers.
Lower layers raise them; only the exchange command turns them into messages
shown to the user.
"""


class MoneyCalcError(Exception):
    """Base exception for money calculator errors."""
    pass


class RemoteFetchError(MoneyCalcError):
    """Raised when a remote request fails (connection, non-200 status, unreadable body)."""
    pass


class MalformedResponseError(MoneyCalcError):
    """Raised when a response is not valid JSON or lacks the expected fields."""
    pass


class InvalidExchangeInputError(MoneyCalcError):
    """Raised when an exchange is requested between equal currencies or for a negative amount."""
    pass


class UnknownCommandError(MoneyCalcError):
    """Raised when a command name has no registered action."""
    pass
