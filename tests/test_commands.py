"""
Command Registry Tests - Unit Tests for Named Command Dispatch

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- moneycalc.application.commands (CommandRegistry, CommandName)
- unittest.mock (Mock actions)
- pytest (testing framework)
"""
from unittest.mock import Mock

import pytest  # Testing framework for writing and running tests

from moneycalc.application.commands import CommandName, CommandRegistry
from moneycalc.domain.errors import UnknownCommandError


class TestCommandRegistry:
    def test_invoke_missing_command(self):
        registry = CommandRegistry()
        with pytest.raises(UnknownCommandError, match="missing"):
            registry.invoke("missing")

    def test_reregister_overrides(self):
        registry = CommandRegistry()
        first, second = Mock(), Mock()

        registry.register("x", first)
        registry.register("x", second)
        registry.invoke("x")

        first.execute.assert_not_called()
        second.execute.assert_called_once_with()

    def test_plain_callable_action(self):
        registry = CommandRegistry()
        calls = []
        registry.register("hello", lambda: calls.append("hi"))

        registry.invoke("hello")

        assert calls == ["hi"]

    def test_enum_and_literal_names_are_interchangeable(self):
        registry = CommandRegistry()
        action = Mock()
        registry.register(CommandName.EXCHANGE_MONEY, action)

        registry.invoke("exchange money")

        action.execute.assert_called_once_with()
        assert "exchange money" in registry
        assert CommandName.EXCHANGE_MONEY in registry
        assert CommandName.SWAP not in registry

    def test_command_name_values(self):
        assert CommandName.EXCHANGE_MONEY.value == "exchange money"
        assert CommandName.SWAP.value == "swap"
        assert CommandName.SHOW_INFO.value == "show info"
        assert str(CommandName.SHOW_INFO) == "show info"

    def test_invoke_runs_on_calling_thread(self):
        import threading

        registry = CommandRegistry()
        seen = []
        registry.register("where", lambda: seen.append(threading.current_thread()))

        registry.invoke("where")

        assert seen == [threading.current_thread()]

    def test_names(self):
        registry = CommandRegistry()
        registry.register(CommandName.SWAP, Mock())
        registry.register("custom", Mock())
        assert registry.names() == ["swap", "custom"]
