from vterm_mcp.models.filesystem import DirectoryNode, FileNode, FileSystem, FileSystemNode
from vterm_mcp.utils.constants import DEFAULT_HOME_DIR


def _directory(name: str, *children: FileSystemNode) -> DirectoryNode:
    return DirectoryNode(name=name, children={child.name: child for child in children})


def _file(name: str, content: str) -> FileNode:
    return FileNode(name=name, content=content)


def create_initial_file_system() -> FileSystem:
    """Builds the demo tree every exercise starts from."""
    root = _directory(
        "",
        _directory(
            "home",
            _directory(
                "learner",
                _directory(
                    "documents",
                    _file(
                        "notes.txt",
                        "Welcome to Linux!\n\nThis is your notes file.\n"
                        "You can view files using the cat command.\n",
                    ),
                    _file(
                        "todo.txt",
                        "1. Learn terminal basics\n2. Practice navigation\n"
                        "3. Create and manage files\n4. Become a Linux pro!\n",
                    ),
                ),
                _directory(
                    "projects",
                    _file("hello.py", '# My first Python script\nprint("Hello, World!")\n'),
                    _file(
                        "readme.md",
                        "# Projects Folder\n\nThis is where you can store your coding projects.\n",
                    ),
                ),
                _directory(
                    "downloads",
                    _file("image.png", "[Binary image data]"),
                ),
                _file(
                    ".bashrc",
                    '# Bash configuration file\nexport PATH=$PATH:/usr/local/bin\nalias ll="ls -la"\n',
                ),
                _file(".hidden_secret", "You found the hidden file! \U0001f389\n"),
            ),
        ),
        _directory(
            "etc",
            _file("hostname", "linux-learning\n"),
        ),
        _directory("tmp"),
    )

    return FileSystem(root=root, current_path=DEFAULT_HOME_DIR, home_dir=DEFAULT_HOME_DIR)
