"""Node and filesystem models for the virtual terminal."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class FileNode(BaseModel):
    """A leaf holding text content."""

    model_config = ConfigDict(frozen=True)

    type: Literal["file"] = "file"
    name: str
    content: str = ""


class DirectoryNode(BaseModel):
    """A directory owning its children by name."""

    model_config = ConfigDict(frozen=True)

    type: Literal["directory"] = "directory"
    name: str
    children: Mapping[str, "FileSystemNode"] = Field(default_factory=dict, validate_default=True)

    @field_validator("children", mode="after")
    @classmethod
    def _freeze_children(cls, children: Mapping[str, "FileSystemNode"]) -> Mapping[str, "FileSystemNode"]:
        # Read-only: subtrees are shared between snapshots
        return MappingProxyType(dict(children))

    @field_serializer("children")
    def _dump_children(self, children: Mapping[str, "FileSystemNode"]) -> dict:
        return dict(children)

    def with_children(self, children: Mapping[str, "FileSystemNode"]) -> "DirectoryNode":
        """Returns a copy of this directory holding `children` instead."""
        return DirectoryNode(name=self.name, children=children)

    def walk(self, segments: list[str]) -> "FileSystemNode | None":
        """
        Follows `segments` down from this directory.

        Returns None when a segment is missing or when a file is met
        before the last segment.
        """
        current: FileSystemNode = self
        for segment in segments:
            match current:
                case DirectoryNode(children=children):
                    child = children.get(segment)
                    if child is None:
                        return None
                    current = child
                case FileNode():
                    return None
        return current


FileSystemNode = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="type")]

DirectoryNode.model_rebuild()


class FileSystem(BaseModel):
    """The in-memory tree together with the working and home directories."""

    model_config = ConfigDict(frozen=True)

    root: DirectoryNode
    current_path: str = "/"
    home_dir: str = "/"

    @model_validator(mode="after")
    def _check_directories(self) -> "FileSystem":
        for field_name in ("current_path", "home_dir"):
            path = getattr(self, field_name)
            segments = [segment for segment in path.split("/") if segment]
            if not path.startswith("/") or not isinstance(self.root.walk(segments), DirectoryNode):
                raise ValueError(f"{field_name} '{path}' is not an existing directory")
        return self
