"""
Configuration and dependency management for the terminal MCP server.
"""

import logging
from functools import lru_cache

from fastapi import Depends

from vterm_mcp.tools.terminal_tool import TerminalTool
from vterm_mcp.utils.config import ServiceConfig
from vterm_mcp.utils.session_manager import SessionManager

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    Cached so the environment and .env file are parsed only once.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


@lru_cache
def get_session_manager() -> SessionManager:
    """Returns a singleton instance of the SessionManager."""
    logger.info("Initializing SessionManager singleton.")
    return SessionManager()


@lru_cache
def get_terminal_tool_provider(
    session_manager: SessionManager = Depends(get_session_manager),
) -> TerminalTool:
    """
    Returns a cached instance of the TerminalTool, using FastAPI's dependency
    injection to provide the SessionManager.
    """
    if not isinstance(session_manager, SessionManager):
        # Called directly rather than through FastAPI's resolver.
        session_manager = get_session_manager()
    logger.info("Initializing TerminalTool singleton with SessionManager dependency.")
    return TerminalTool(
        session_manager=session_manager,
        history_limit=get_base_config().TERMINAL_HISTORY_LIMIT,
    )
