#!/usr/bin/env python3
"""
Unit тесты для utils/config.py и utils/dependencies.py
"""

import pytest
from pydantic import ValidationError

from vterm_mcp.tools.terminal_tool import TerminalTool
from vterm_mcp.utils.config import ServiceConfig
from vterm_mcp.utils.dependencies import get_session_manager, get_terminal_tool_provider


class TestServiceConfig:
    """Тесты для ServiceConfig"""

    def test_defaults(self, monkeypatch):
        for name in ["MCP_TRANSPORT", "MCP_HOST", "MCP_PORT", "TERMINAL_HISTORY_LIMIT"]:
            monkeypatch.delenv(name, raising=False)
        config = ServiceConfig()
        assert config.MCP_TRANSPORT == "stdio"
        assert config.MCP_PORT == 8661
        assert config.TERMINAL_HISTORY_LIMIT == 500

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MCP_PORT", "9000")
        monkeypatch.setenv("TERMINAL_HISTORY_LIMIT", "10")
        config = ServiceConfig()
        assert config.MCP_PORT == 9000
        assert config.TERMINAL_HISTORY_LIMIT == 10

    @pytest.mark.parametrize("limit", ["0", "-5"])
    def test_history_limit_must_be_positive(self, monkeypatch, limit):
        monkeypatch.setenv("TERMINAL_HISTORY_LIMIT", limit)
        with pytest.raises(ValidationError):
            ServiceConfig()


class TestProviders:
    """Тесты для провайдеров зависимостей"""

    def test_terminal_tool_is_a_singleton(self):
        tool = get_terminal_tool_provider()
        assert isinstance(tool, TerminalTool)
        assert get_terminal_tool_provider() is tool

    def test_session_manager_is_shared(self):
        assert get_session_manager() is get_session_manager()
