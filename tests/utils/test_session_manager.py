#!/usr/bin/env python3
"""
Unit тесты для utils/session_manager.py
"""

import pytest

from vterm_mcp.utils.constants import WELCOME_LINES
from vterm_mcp.utils.session_manager import SessionManager
from vterm_mcp.vfs import create_initial_file_system


class TestSessionManager:
    """Тесты для SessionManager"""

    @pytest.fixture
    def manager(self):
        return SessionManager()

    def test_get_session_creates_once(self, manager):
        session = manager.get_session("a")
        assert manager.get_session("a") is session
        assert session.session_id == "a"
        assert session.fs == create_initial_file_system()

    def test_new_session_shows_welcome(self, manager):
        session = manager.get_session()
        assert [line.content for line in session.transcript] == WELCOME_LINES
        assert all(line.kind == "output" for line in session.transcript)
        assert session.history == []

    def test_sessions_are_independent(self, manager):
        first = manager.get_session("first")
        second = manager.get_session("second")
        first.history.append("pwd")
        assert second.history == []
        assert manager.session_ids() == ["first", "second"]

    def test_reset_replaces_session(self, manager):
        session = manager.get_session("a")
        session.history.append("ls")
        fresh = manager.reset_session("a")
        assert fresh is not session
        assert fresh.history == []
        assert manager.get_session("a") is fresh

    def test_drop_session(self, manager):
        manager.get_session("a")
        assert manager.drop_session("a") is True
        assert manager.drop_session("a") is False
        assert manager.session_ids() == []
