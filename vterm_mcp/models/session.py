from typing import Literal

from pydantic import BaseModel, Field

from vterm_mcp.models.filesystem import FileSystem


class TerminalLine(BaseModel):
    """One line of the terminal screen."""

    kind: Literal["input", "output"]
    content: str
    prompt: str | None = None  # Prompt shown when an input line was submitted


class TerminalSession(BaseModel):
    """Stores the terminal state for a single session."""

    session_id: str = "default"
    fs: FileSystem
    history: list[str] = Field(default_factory=list)
    transcript: list[TerminalLine] = Field(default_factory=list)
