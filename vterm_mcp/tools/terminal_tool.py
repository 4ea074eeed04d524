import logging
from typing import override

from vterm_mcp.commands import CommandResult, get_prompt, process_command
from vterm_mcp.models.session import TerminalLine, TerminalSession
from vterm_mcp.utils.constants import DEFAULT_HISTORY_LIMIT
from vterm_mcp.utils.session_manager import SessionManager
from vterm_mcp.vfs import is_file

from .base import Tool, ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from .utils.file_utils import collect_tree
from .utils.formatting_utils import format_command_result, format_history, format_screen, format_tree

logger = logging.getLogger(__name__)

TerminalToolSubCommands = ["run", "prompt", "reset", "history", "screen", "tree"]


class TerminalTool(Tool):
    """
    Tool for driving the Linux terminal simulator of a session.

    The `run` command feeds one input line to the simulated shell and keeps
    the resulting filesystem in the session. The remaining commands inspect
    the session (prompt, history, screen, tree) or restart it (`reset`).
    """

    def __init__(
        self,
        session_manager: SessionManager,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        model_provider: str | None = None,
    ) -> None:
        super().__init__(model_provider)
        if history_limit < 1:
            raise ValueError(f"history_limit must be at least 1, got {history_limit}")
        self._sessions = session_manager
        self._history_limit = history_limit

    @override
    def get_name(self) -> str:
        return "terminal"

    @override
    def get_description(self) -> str:
        return """A simulated Linux terminal with an in-memory filesystem, for practicing shell basics.
* `run` executes one command line: pwd, ls, cd, cat, touch, mkdir, rm, echo, clear, whoami, hostname, help.
* `prompt` shows the current prompt, `history` the submitted commands, `screen` the terminal as displayed.
* `tree` lists a directory subtree as JSON, `reset` restores the pristine filesystem.
Nothing here touches the real machine."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="subcommand",
                type="string",
                description=f"The command to run. Allowed options are: {', '.join(TerminalToolSubCommands)}.",
                required=True,
                enum=TerminalToolSubCommands,
            ),
            ToolParameter(
                name="session_id",
                type="string",
                description="Terminal session to use. Defaults to 'default'.",
                required=False,
            ),
            ToolParameter(
                name="command",
                type="string",
                description="For `run`. The command line to execute, e.g. 'ls -a'.",
                required=False,
            ),
            ToolParameter(
                name="path",
                type="string",
                description="For `tree`. Relative or absolute path of the directory. Defaults to the working directory.",
                required=False,
            ),
            ToolParameter(
                name="show_hidden",
                type="boolean",
                description="For `tree`. Include names starting with a dot.",
                required=False,
            ),
        ]

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        subcommand = arguments.get("subcommand")
        if not isinstance(subcommand, str):
            return ToolExecResult(error="Subcommand must be a string.", error_code=-1)

        session_id = arguments.get("session_id") or "default"
        if not isinstance(session_id, str):
            return ToolExecResult(error="Session id must be a string.", error_code=-1)

        try:
            match subcommand:
                case "run":
                    return self._run_handler(self._sessions.get_session(session_id), arguments)
                case "prompt":
                    return ToolExecResult(output=get_prompt(self._sessions.get_session(session_id).fs))
                case "reset":
                    return self._reset_handler(session_id)
                case "history":
                    return ToolExecResult(output=format_history(self._sessions.get_session(session_id).history))
                case "screen":
                    return ToolExecResult(output=format_screen(self._sessions.get_session(session_id).transcript))
                case "tree":
                    return self._tree_handler(self._sessions.get_session(session_id), arguments)
                case _:
                    return ToolExecResult(error=f"Unknown subcommand: {subcommand}", error_code=-1)
        except ToolError as e:
            return ToolExecResult(error=e.message, error_code=-1)

    def run_line(self, session: TerminalSession, line: str) -> tuple[str, CommandResult]:
        """Executes one line and records it on the session's screen and history."""
        prompt = get_prompt(session.fs)
        result = process_command(session.fs, line)

        if result.clear_screen:
            session.transcript.clear()
        else:
            session.transcript.append(TerminalLine(kind="input", content=line, prompt=prompt))
            session.transcript.extend(TerminalLine(kind="output", content=out) for out in result.output_lines)

        session.fs = result.new_file_system

        if line.strip():
            session.history.append(line)
            del session.history[: -self._history_limit]

        return prompt, result

    def _run_handler(self, session: TerminalSession, args: ToolCallArguments) -> ToolExecResult:
        line = args.get("command")
        if not isinstance(line, str):
            raise ToolError("The 'command' parameter is required for run and must be a string.")

        logger.debug("Session '%s' runs %r", session.session_id, line)
        prompt, result = self.run_line(session, line)
        return ToolExecResult(output=format_command_result(result, prompt, get_prompt(session.fs)))

    def _reset_handler(self, session_id: str) -> ToolExecResult:
        session = self._sessions.reset_session(session_id)
        return ToolExecResult(output=f"Terminal reset. Prompt is now {get_prompt(session.fs)}")

    def _tree_handler(self, session: TerminalSession, args: ToolCallArguments) -> ToolExecResult:
        path = args.get("path") or "."
        if not isinstance(path, str):
            raise ToolError("Path must be a string.")
        show_hidden = bool(args.get("show_hidden", False))

        tree = collect_tree(session.fs, path, show_hidden)
        if tree is None and is_file(session.fs, path):
            return ToolExecResult(output=format_tree(None, path, error="Not a directory"))
        return ToolExecResult(output=format_tree(tree, path))
