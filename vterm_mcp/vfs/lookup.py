"""Read-only queries against a filesystem value."""

from vterm_mcp.models.filesystem import DirectoryNode, FileNode, FileSystem, FileSystemNode
from vterm_mcp.utils.path_utils import resolve_path, split_path


def get_node(fs: FileSystem, path: str) -> FileSystemNode | None:
    """Returns the node at `path`, or None if nothing lives there."""
    return fs.root.walk(split_path(resolve_path(fs, path)))


def path_exists(fs: FileSystem, path: str) -> bool:
    return get_node(fs, path) is not None


def is_directory(fs: FileSystem, path: str) -> bool:
    return isinstance(get_node(fs, path), DirectoryNode)


def is_file(fs: FileSystem, path: str) -> bool:
    return isinstance(get_node(fs, path), FileNode)


def list_directory(fs: FileSystem, path: str, show_hidden: bool = False) -> list[str]:
    """
    Lists the child names of a directory in sorted order.

    Names starting with '.' are left out unless `show_hidden` is set.
    Anything that is not a directory lists as empty.
    """
    match get_node(fs, path):
        case DirectoryNode(children=children):
            names = children.keys()
        case _:
            return []

    if not show_hidden:
        names = [name for name in names if not name.startswith(".")]
    return sorted(names)


def read_file(fs: FileSystem, path: str) -> str | None:
    match get_node(fs, path):
        case FileNode(content=content):
            return content
        case _:
            return None
