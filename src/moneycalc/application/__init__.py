# src/moneycalc/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the command registry, the exchange use case, the
commands bound to the UI and the chart animator.
No direct widget dependencies - talks to the UI through view protocols.
"""

from moneycalc.application.commands import Command, CommandName, CommandRegistry
from moneycalc.application.chart_animator import AnimationState, ChartAnimator, PointSink
from moneycalc.application.exchange_service import (
    ExchangeResult,
    ExchangeService,
    convert,
    validate_exchange,
)
from moneycalc.application.exchange_commands import (
    ExchangeMoneyCommand,
    ShowInfoCommand,
    SwapCurrenciesCommand,
)
from moneycalc.application.task_runner import InlineTaskRunner, TaskRunner, ThreadedTaskRunner

__all__ = [
    "Command",
    "CommandName",
    "CommandRegistry",
    "AnimationState",
    "ChartAnimator",
    "PointSink",
    "ExchangeResult",
    "ExchangeService",
    "convert",
    "validate_exchange",
    "ExchangeMoneyCommand",
    "ShowInfoCommand",
    "SwapCurrenciesCommand",
    "InlineTaskRunner",
    "TaskRunner",
    "ThreadedTaskRunner",
]
