"""
MCP server definition for the virtual terminal.
"""

import logging
from typing import Any, Optional

from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware

from mcp.server.fastmcp import Context, FastMCP

from vterm_mcp.prompts import get_prompts
from vterm_mcp.utils.config import ServiceConfig
from vterm_mcp.utils.dependencies import get_base_config, get_terminal_tool_provider


# Get a module-level logger
logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",  # Allow any origin
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "vterm-mcp",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )

# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


# --- Prompt Handlers ---
@mcp_app.prompt(title="Linux Terminal Tutor")
def get_system_prompt() -> str:
    """Provides the system prompt for tutoring with the simulated terminal."""
    prompts = get_prompts()
    return prompts["terminal-tutor-prompt"]

# --- Tool Definitions ---

@mcp_app.tool(name="terminal")
async def terminal_tool(
    context: Context,
    subcommand: str,
    session_id: str = "default",
    command: Optional[str] = None,
    path: Optional[str] = None,
    show_hidden: bool = False,
) -> dict[str, Any]:
    """
    A simulated Linux terminal backed by an in-memory filesystem.

    Args:
        subcommand: One of 'run', 'prompt', 'reset', 'history', 'screen', 'tree'.
        session_id: The terminal session to use. Each session has its own filesystem.
        command: For 'run'. The command line to execute, e.g. 'cd documents'.
        path: For 'tree'. The directory to list. Defaults to the working directory.
        show_hidden: For 'tree'. Include names starting with a dot.

    Returns:
        A dictionary containing the result of the operation.
    """
    logger.info(f"Executing terminal subcommand '{subcommand}' in session '{session_id}'")
    try:
        tool = get_terminal_tool_provider()
        args = {
            "subcommand": subcommand,
            "session_id": session_id,
            "command": command,
            "path": path,
            "show_hidden": show_hidden,
        }
        # Filter out None values so we don't pass them to the tool
        args = {k: v for k, v in args.items() if v is not None}

        result = await tool.execute(args)
        if result.error:
            return {"status": "error", "error": result.error, "exit_code": result.error_code}
        return {"status": "success", "result": result.output, "exit_code": result.error_code}

    except Exception as e:
        logger.error(f"Error executing terminal subcommand: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}
