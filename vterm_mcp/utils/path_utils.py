from vterm_mcp.models.filesystem import FileSystem


def split_path(path: str) -> list[str]:
    """Returns the non-empty segments of a slash separated path."""
    return [segment for segment in path.split("/") if segment]


def join_path(segments: list[str]) -> str:
    return "/" + "/".join(segments)


def parent_path(path: str) -> str:
    """Parent of an absolute path; the parent of '/' is '/'."""
    return join_path(split_path(path)[:-1])


def is_ancestor_or_self(ancestor: str, path: str) -> bool:
    """True when `path` equals `ancestor` or lies somewhere below it."""
    ancestor_segments = split_path(ancestor)
    return split_path(path)[: len(ancestor_segments)] == ancestor_segments


def resolve_path(fs: FileSystem, input_path: str) -> str:
    """
    Resolves a user-provided path against the filesystem's working directory.

    Handles absolute and relative paths, '.', '..' and the '~' home shortcut.
    The tree is never consulted, so the result may name a location that does
    not exist; '..' at the root stays at the root.

    Args:
        fs: The filesystem providing the working and home directories.
        input_path: The path string provided by the user.

    Returns:
        A canonical absolute path.
    """
    path = input_path.strip()

    if not path or path == ".":
        return fs.current_path

    if path == "~":
        return fs.home_dir
    if path.startswith("~/"):
        path = fs.home_dir + path[1:]

    if path.startswith("/"):
        segments = split_path(path)
    else:
        segments = split_path(fs.current_path) + split_path(path)

    resolved: list[str] = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if resolved:
                resolved.pop()
        else:
            resolved.append(segment)

    return join_path(resolved)


def get_display_path(fs: FileSystem, path: str | None = None) -> str:
    """Shortens the home directory prefix to '~' for prompts."""
    actual_path = path or fs.current_path
    if actual_path == fs.home_dir:
        return "~"
    if actual_path.startswith(fs.home_dir + "/"):
        return "~" + actual_path[len(fs.home_dir):]
    return actual_path or "/"
