from collections import deque
from typing import Dict, List

from vterm_mcp.models.filesystem import DirectoryNode, FileNode, FileSystem, FileSystemNode
from vterm_mcp.utils.constants import DIRECTORY_PERMISSIONS, FILE_PERMISSIONS, TERMINAL_USER
from vterm_mcp.utils.path_utils import join_path, resolve_path, split_path
from vterm_mcp.vfs import get_node


def get_node_info(path: str, node: FileSystemNode, depth: int = 0) -> Dict:
    """Get detailed information about a node."""
    match node:
        case DirectoryNode(children=children):
            return {
                "name": node.name or "/",
                "is_dir": True,
                "size": len(children),
                "permissions": DIRECTORY_PERMISSIONS,
                "owner": TERMINAL_USER,
                "path": path,
                "depth": depth,
            }
        case FileNode(content=content):
            return {
                "name": node.name,
                "is_dir": False,
                "size": len(content),
                "permissions": FILE_PERMISSIONS,
                "owner": TERMINAL_USER,
                "path": path,
                "depth": depth,
            }


def collect_tree(fs: FileSystem, path: str = ".", show_hidden: bool = False) -> List[Dict] | None:
    """
    Walk the subtree at `path` breadth-first.

    Returns None when `path` does not name a directory. The starting node
    itself is not part of the result; its children have depth 1.
    """
    start = resolve_path(fs, path)
    node = get_node(fs, start)
    if not isinstance(node, DirectoryNode):
        return None

    items: List[Dict] = []
    queue: deque[tuple[str, FileSystemNode, int]] = deque([(start, node, 0)])
    while queue:
        current_path, current, depth = queue.popleft()
        if not isinstance(current, DirectoryNode):
            continue
        for name in sorted(current.children):
            if not show_hidden and name.startswith("."):
                continue
            child = current.children[name]
            child_path = join_path(split_path(current_path) + [name])
            items.append(get_node_info(child_path, child, depth + 1))
            queue.append((child_path, child, depth + 1))
    return items
