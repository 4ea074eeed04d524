#!/usr/bin/env python3
"""
Unit тесты для models/filesystem.py и начального дерева
"""

import pytest
from pydantic import ValidationError

from vterm_mcp.models.filesystem import DirectoryNode, FileNode, FileSystem
from vterm_mcp.vfs import create_initial_file_system


class TestNodes:
    """Тесты для узлов дерева"""

    def test_nodes_are_tagged(self):
        assert FileNode(name="a").type == "file"
        assert DirectoryNode(name="d").type == "directory"

    def test_children_validate_from_plain_data(self):
        """Дискриминированный union по полю type"""
        directory = DirectoryNode.model_validate({
            "name": "d",
            "children": {
                "f": {"type": "file", "name": "f", "content": "x"},
                "sub": {"type": "directory", "name": "sub", "children": {}},
            },
        })
        assert isinstance(directory.children["f"], FileNode)
        assert isinstance(directory.children["sub"], DirectoryNode)

    def test_nodes_are_frozen(self):
        node = FileNode(name="a", content="x")
        with pytest.raises(ValidationError):
            node.content = "y"

    def test_children_are_read_only(self):
        directory = DirectoryNode(name="d", children={"f": FileNode(name="f")})
        with pytest.raises(AttributeError):
            directory.children.pop("f")
        with pytest.raises(TypeError):
            directory.children["g"] = FileNode(name="g")
        assert DirectoryNode(name="empty").children == {}

    def test_with_children_keeps_name(self):
        directory = DirectoryNode(name="d")
        updated = directory.with_children({"f": FileNode(name="f")})
        assert updated.name == "d"
        assert list(updated.children) == ["f"]
        assert directory.children == {}

    def test_dump_round_trip(self):
        tree = create_initial_file_system().root
        assert DirectoryNode.model_validate(tree.model_dump()) == tree

    def test_walk(self):
        tree = DirectoryNode(name="", children={
            "d": DirectoryNode(name="d", children={"f": FileNode(name="f")}),
        })
        assert tree.walk([]) is tree
        assert tree.walk(["d", "f"]).name == "f"
        assert tree.walk(["d", "missing"]) is None
        assert tree.walk(["d", "f", "below-a-file"]) is None


class TestFileSystemModel:
    """Тесты для FileSystem"""

    def test_current_path_must_be_a_directory(self):
        root = DirectoryNode(name="", children={"f": FileNode(name="f")})
        with pytest.raises(ValidationError):
            FileSystem(root=root, current_path="/f", home_dir="/")
        with pytest.raises(ValidationError):
            FileSystem(root=root, current_path="/", home_dir="/missing")

    def test_defaults_to_root(self):
        fs = FileSystem(root=DirectoryNode(name=""))
        assert fs.current_path == "/"
        assert fs.home_dir == "/"


class TestInitialFileSystem:
    """Тесты для create_initial_file_system"""

    @pytest.fixture
    def fs(self):
        return create_initial_file_system()

    def test_starts_at_home(self, fs):
        assert fs.current_path == "/home/learner"
        assert fs.home_dir == "/home/learner"
        assert fs.root.name == ""

    def test_seeded_tree(self, fs):
        learner = fs.root.walk(["home", "learner"])
        assert set(learner.children) == {"documents", "projects", "downloads", ".bashrc", ".hidden_secret"}
        assert set(fs.root.children) == {"home", "etc", "tmp"}
        assert fs.root.walk(["etc", "hostname"]).content == "linux-learning\n"
        assert fs.root.walk(["tmp"]).children == {}

    def test_each_call_is_pristine_and_equal(self, fs):
        other = create_initial_file_system()
        assert other == fs
        assert other is not fs
