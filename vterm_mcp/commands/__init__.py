"""Command interpreter for the terminal simulator."""

from .processor import ParsedCommand, get_prompt, parse_command, process_command
from .result import CommandResult

__all__ = ["CommandResult", "ParsedCommand", "get_prompt", "parse_command", "process_command"]
