from .filesystem import DirectoryNode, FileNode, FileSystem, FileSystemNode
from .session import TerminalLine, TerminalSession

__all__ = ["DirectoryNode", "FileNode", "FileSystem", "FileSystemNode", "TerminalLine", "TerminalSession"]
