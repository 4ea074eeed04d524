"""
Copy-on-write edits of a filesystem value.

Only the directories between the root and the edited parent are copied;
every other subtree is shared with the input. None of these functions
raise: when a precondition does not hold the input value is returned as is.
Reporting the failure to the user is the command layer's job.
"""

import logging
from collections.abc import Callable

from vterm_mcp.models.filesystem import DirectoryNode, FileNode, FileSystem, FileSystemNode
from vterm_mcp.utils.path_utils import is_ancestor_or_self, resolve_path, split_path
from vterm_mcp.vfs.lookup import is_directory

logger = logging.getLogger(__name__)

DirectoryEdit = Callable[[DirectoryNode], DirectoryNode | None]


def _edit_directory(
    directory: DirectoryNode, segments: list[str], edit: DirectoryEdit
) -> DirectoryNode | None:
    """
    Applies `edit` to the directory at `segments` below `directory`.

    Returns the new `directory` with the edited branch copied, or None if the
    target is not a directory or the edit itself declined.
    """
    if not segments:
        return edit(directory)

    head, rest = segments[0], segments[1:]
    match directory.children.get(head):
        case DirectoryNode() as child:
            new_child = _edit_directory(child, rest, edit)
        case _:
            return None

    if new_child is None:
        return None
    return directory.with_children({**directory.children, head: new_child})


def _edit_parent(fs: FileSystem, path: str, edit: Callable[[DirectoryNode, str], DirectoryNode | None]) -> FileSystem:
    segments = split_path(resolve_path(fs, path))
    if not segments:
        return fs

    name = segments.pop()
    new_root = _edit_directory(fs.root, segments, lambda parent: edit(parent, name))
    if new_root is None:
        return fs
    return fs.model_copy(update={"root": new_root})


def _put_child(build: Callable[[str], FileSystemNode]) -> Callable[[DirectoryNode, str], DirectoryNode]:
    def edit(parent: DirectoryNode, name: str) -> DirectoryNode:
        return parent.with_children({**parent.children, name: build(name)})

    return edit


def create_file(fs: FileSystem, path: str, content: str = "") -> FileSystem:
    """Inserts (or overwrites) a file; the parent directory must already exist."""
    new_fs = _edit_parent(fs, path, _put_child(lambda name: FileNode(name=name, content=content)))
    if new_fs is not fs:
        logger.debug("Created file %s", resolve_path(fs, path))
    return new_fs


def create_directory(fs: FileSystem, path: str) -> FileSystem:
    """Inserts an empty directory; the parent directory must already exist."""
    new_fs = _edit_parent(fs, path, _put_child(lambda name: DirectoryNode(name=name)))
    if new_fs is not fs:
        logger.debug("Created directory %s", resolve_path(fs, path))
    return new_fs


def is_protected_path(fs: FileSystem, path: str) -> bool:
    """The root, the home directory and its ancestors can never be removed."""
    return is_ancestor_or_self(resolve_path(fs, path), fs.home_dir)


def remove(fs: FileSystem, path: str) -> FileSystem:
    """
    Removes a file or a whole directory subtree.

    If the working directory disappears with the removed subtree, the
    returned filesystem is moved back to the home directory.
    """
    resolved = resolve_path(fs, path)
    if is_protected_path(fs, resolved):
        logger.warning("Refusing to remove protected path %s", resolved)
        return fs

    def drop(parent: DirectoryNode, name: str) -> DirectoryNode | None:
        if name not in parent.children:
            return None
        children = {key: child for key, child in parent.children.items() if key != name}
        return parent.with_children(children)

    new_fs = _edit_parent(fs, resolved, drop)
    if new_fs is fs:
        return fs

    logger.debug("Removed %s", resolved)
    if not is_directory(new_fs, new_fs.current_path):
        logger.info("Working directory %s was removed, returning to %s", new_fs.current_path, new_fs.home_dir)
        new_fs = new_fs.model_copy(update={"current_path": new_fs.home_dir})
    return new_fs


def change_directory(fs: FileSystem, path: str) -> FileSystem:
    resolved = resolve_path(fs, path)
    if not is_directory(fs, resolved):
        return fs
    return fs.model_copy(update={"current_path": resolved})
