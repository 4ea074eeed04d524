"""In-memory filesystem backing the terminal simulator."""

from .lookup import get_node, is_directory, is_file, list_directory, path_exists, read_file
from .mutations import change_directory, create_directory, create_file, is_protected_path, remove
from .seed import create_initial_file_system

__all__ = [
    "change_directory",
    "create_directory",
    "create_file",
    "create_initial_file_system",
    "get_node",
    "is_directory",
    "is_file",
    "is_protected_path",
    "list_directory",
    "path_exists",
    "read_file",
    "remove",
]
