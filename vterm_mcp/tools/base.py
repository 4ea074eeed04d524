"""Base classes shared by the MCP tools."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

ParamSchemaValue = str | list[str] | bool | dict[str, object]
ToolCallArguments = dict[str, object]


class ToolError(Exception):
    """Raised inside a tool when its arguments or state are unusable."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message: str = message


@dataclass
class ToolExecResult:
    """Intermediate result of a tool execution."""

    output: str | None = None
    error: str | None = None
    error_code: int = 0


@dataclass
class ToolParameter:
    """Tool parameter definition."""

    name: str
    type: str | list[str]
    description: str
    enum: list[str] | None = None
    items: dict[str, object] | None = None
    required: bool = True


class Tool(ABC):
    """Base class for all tools."""

    def __init__(self, model_provider: str | None = None) -> None:
        self._model_provider = model_provider

    def get_model_provider(self) -> str | None:
        return self._model_provider

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_parameters(self) -> list[ToolParameter]:
        pass

    @abstractmethod
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        pass

    def json_definition(self) -> dict[str, object]:
        """Get definition of the tool in JSON schema format."""
        return {
            "name": self.get_name(),
            "description": self.get_description(),
            "parameters": self.get_input_schema(),
        }

    def get_input_schema(self) -> dict[str, object]:
        properties: dict[str, dict[str, ParamSchemaValue]] = {}
        required: list[str] = []

        for param in self.get_parameters():
            schema: dict[str, ParamSchemaValue] = {
                "type": param.type,
                "description": param.description,
            }
            if param.enum:
                schema["enum"] = param.enum
            if param.items:
                schema["items"] = param.items
            properties[param.name] = schema
            if param.required:
                required.append(param.name)

        return {"type": "object", "properties": properties, "required": required}
