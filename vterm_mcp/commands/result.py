from dataclasses import dataclass, field

from vterm_mcp.models.filesystem import FileSystem


@dataclass
class CommandResult:
    """Outcome of one command: text to show and the filesystem to keep."""

    new_file_system: FileSystem
    output_lines: list[str] = field(default_factory=list)
    clear_screen: bool = False
