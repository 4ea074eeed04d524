"""Handlers for the builtin shell commands."""

import re

from vterm_mcp.models.filesystem import DirectoryNode, FileNode, FileSystem
from vterm_mcp.utils.constants import (
    DIRECTORY_PERMISSIONS,
    FILE_PERMISSIONS,
    TERMINAL_HOSTNAME,
    TERMINAL_USER,
)
from vterm_mcp.utils.path_utils import parent_path, resolve_path
from vterm_mcp.vfs import (
    change_directory,
    create_directory,
    create_file,
    get_node,
    is_directory,
    is_protected_path,
    list_directory,
    path_exists,
    remove,
)

from .result import CommandResult

HELP_LINES = [
    "Available commands:",
    "",
    "  pwd          Print current working directory",
    "  ls           List directory contents",
    "    ls -a      Include hidden files (starting with .)",
    "    ls -l      Long format with details",
    "  cd <dir>     Change directory",
    "    cd ..      Go to parent directory",
    "    cd ~       Go to home directory",
    "  cat <file>   Display file contents",
    "  touch <file> Create an empty file",
    "  mkdir <dir>  Create a directory",
    "  rm <file>    Remove a file",
    "    rm -r <dir> Remove a directory",
    "  echo <text>  Print text to the terminal",
    "  clear        Clear the terminal screen",
    "  whoami       Print current username",
    "  hostname     Print the machine name",
    "  help         Show this help message",
    "",
]

_SURROUNDING_QUOTES = re.compile(r"^[\"']|[\"']$")


def _error(fs: FileSystem, message: str) -> CommandResult:
    return CommandResult(output_lines=[message], new_file_system=fs)


def _split_flags(args: list[str]) -> tuple[set[str], list[str]]:
    """Separates '-xyz' style flags (as single letters) from operands."""
    flags: set[str] = set()
    operands: list[str] = []
    for arg in args:
        if arg.startswith("-") and len(arg) > 1:
            flags.update(arg[1:])
        else:
            operands.append(arg)
    return flags, operands


def cmd_pwd(fs: FileSystem) -> CommandResult:
    return CommandResult(output_lines=[fs.current_path], new_file_system=fs)


def _long_entry(name: str, node: DirectoryNode | FileNode) -> str:
    match node:
        case DirectoryNode():
            return f"{DIRECTORY_PERMISSIONS}  {TERMINAL_USER}  {TERMINAL_USER}  {name}/"
        case FileNode(content=content):
            return f"{FILE_PERMISSIONS}  {TERMINAL_USER}  {TERMINAL_USER}  {len(content):>4}  {name}"


def cmd_ls(fs: FileSystem, args: list[str]) -> CommandResult:
    flags, operands = _split_flags(args)
    target = operands[-1] if operands else "."
    resolved = resolve_path(fs, target)

    match get_node(fs, resolved):
        case None:
            return _error(fs, f"ls: cannot access '{target}': No such file or directory")
        case FileNode(name=name):
            return CommandResult(output_lines=[name], new_file_system=fs)
        case DirectoryNode(children=children):
            names = list_directory(fs, resolved, show_hidden="a" in flags)

    if not names:
        return CommandResult(output_lines=[], new_file_system=fs)

    if "l" in flags:
        return CommandResult(
            output_lines=[_long_entry(name, children[name]) for name in names],
            new_file_system=fs,
        )

    entries = [f"{name}/" if isinstance(children[name], DirectoryNode) else name for name in names]
    return CommandResult(output_lines=["  ".join(entries)], new_file_system=fs)


def cmd_cd(fs: FileSystem, args: list[str]) -> CommandResult:
    target = args[0] if args else "~"
    resolved = resolve_path(fs, target)

    if not path_exists(fs, resolved):
        return _error(fs, f"cd: {target}: No such file or directory")
    if not is_directory(fs, resolved):
        return _error(fs, f"cd: {target}: Not a directory")

    return CommandResult(output_lines=[], new_file_system=change_directory(fs, resolved))


def cmd_cat(fs: FileSystem, args: list[str]) -> CommandResult:
    if not args:
        return _error(fs, "cat: missing file operand")

    target = args[0]
    match get_node(fs, target):
        case None:
            return _error(fs, f"cat: {target}: No such file or directory")
        case DirectoryNode():
            return _error(fs, f"cat: {target}: Is a directory")
        case FileNode(content=content):
            lines = content.split("\n")
            if lines[-1] == "":
                lines.pop()
            return CommandResult(output_lines=lines, new_file_system=fs)


def cmd_touch(fs: FileSystem, args: list[str]) -> CommandResult:
    if not args:
        return _error(fs, "touch: missing file operand")

    target = args[0]
    resolved = resolve_path(fs, target)

    if not is_directory(fs, parent_path(resolved)):
        return _error(fs, f"touch: cannot touch '{target}': No such file or directory")

    # Existing files keep their content; there are no timestamps to update
    if path_exists(fs, resolved):
        return CommandResult(output_lines=[], new_file_system=fs)

    return CommandResult(output_lines=[], new_file_system=create_file(fs, resolved, ""))


def cmd_mkdir(fs: FileSystem, args: list[str]) -> CommandResult:
    if not args:
        return _error(fs, "mkdir: missing operand")

    target = args[0]
    resolved = resolve_path(fs, target)

    if path_exists(fs, resolved):
        return _error(fs, f"mkdir: cannot create directory '{target}': File exists")
    if not is_directory(fs, parent_path(resolved)):
        return _error(fs, f"mkdir: cannot create directory '{target}': No such file or directory")

    return CommandResult(output_lines=[], new_file_system=create_directory(fs, resolved))


def cmd_rm(fs: FileSystem, args: list[str]) -> CommandResult:
    flags, operands = _split_flags(args)
    if not operands:
        return _error(fs, "rm: missing operand")

    target = operands[0]
    resolved = resolve_path(fs, target)

    if not path_exists(fs, resolved):
        return _error(fs, f"rm: cannot remove '{target}': No such file or directory")
    if is_directory(fs, resolved) and not flags & {"r", "R"}:
        return _error(fs, f"rm: cannot remove '{target}': Is a directory (use -r to remove)")
    if is_protected_path(fs, resolved):
        return _error(fs, f"rm: cannot remove '{target}': Operation not permitted")

    return CommandResult(output_lines=[], new_file_system=remove(fs, resolved))


def cmd_echo(fs: FileSystem, args: list[str]) -> CommandResult:
    text = _SURROUNDING_QUOTES.sub("", " ".join(args))
    return CommandResult(output_lines=[text], new_file_system=fs)


def cmd_help(fs: FileSystem) -> CommandResult:
    return CommandResult(output_lines=list(HELP_LINES), new_file_system=fs)


def cmd_whoami(fs: FileSystem) -> CommandResult:
    return CommandResult(output_lines=[TERMINAL_USER], new_file_system=fs)


def cmd_hostname(fs: FileSystem) -> CommandResult:
    return CommandResult(output_lines=[TERMINAL_HOSTNAME], new_file_system=fs)
