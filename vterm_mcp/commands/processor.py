"""
Parses a terminal input line and dispatches it to a builtin command.

Every command returns a `CommandResult`; failures are reported as
shell-style output lines and never raised to the caller.
"""

import logging
from dataclasses import dataclass, field

from vterm_mcp.models.filesystem import FileSystem
from vterm_mcp.utils.constants import PROMPT_HOST, TERMINAL_USER
from vterm_mcp.utils.path_utils import get_display_path

from . import handlers
from .result import CommandResult

logger = logging.getLogger(__name__)


@dataclass
class ParsedCommand:
    name: str
    args: list[str] = field(default_factory=list)


def parse_command(line: str) -> ParsedCommand:
    """Splits a line on whitespace; the lower-cased first token names the command."""
    parts = line.split()
    if not parts:
        return ParsedCommand(name="")
    return ParsedCommand(name=parts[0].lower(), args=parts[1:])


def process_command(fs: FileSystem, line: str) -> CommandResult:
    """
    Runs one input line against a filesystem.

    Args:
        fs: The filesystem the command runs against. It is never modified.
        line: The raw input line.

    Returns:
        The output lines, the resulting filesystem and whether the screen
        should be cleared.
    """
    command = parse_command(line)
    logger.debug("Processing command %r with args %s in %s", command.name, command.args, fs.current_path)

    match command.name:
        case "pwd":
            return handlers.cmd_pwd(fs)
        case "ls":
            return handlers.cmd_ls(fs, command.args)
        case "cd":
            return handlers.cmd_cd(fs, command.args)
        case "cat":
            return handlers.cmd_cat(fs, command.args)
        case "touch":
            return handlers.cmd_touch(fs, command.args)
        case "mkdir":
            return handlers.cmd_mkdir(fs, command.args)
        case "rm":
            return handlers.cmd_rm(fs, command.args)
        case "echo":
            return handlers.cmd_echo(fs, command.args)
        case "clear":
            return CommandResult(output_lines=[], new_file_system=fs, clear_screen=True)
        case "help":
            return handlers.cmd_help(fs)
        case "whoami":
            return handlers.cmd_whoami(fs)
        case "hostname":
            return handlers.cmd_hostname(fs)
        case "":
            return CommandResult(output_lines=[], new_file_system=fs)
        case _:
            return CommandResult(
                output_lines=[f"{command.name}: command not found. Type 'help' for available commands."],
                new_file_system=fs,
            )


def get_prompt(fs: FileSystem) -> str:
    return f"{TERMINAL_USER}@{PROMPT_HOST}:{get_display_path(fs)}$"
