"""Base tool interface and definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tool_server.errors import ArgumentValidationError

DEPENDENCY_HEADER = "This tool depends on the following tools in order:"


class EmptyArguments(BaseModel):
    """Argument model for tools that take no arguments."""


class ToolDescriptor(BaseModel):
    """Advertised definition of a tool, as returned by a tools listing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")

    def to_dict(self) -> dict[str, Any]:
        """Serialize with protocol field names."""
        return self.model_dump(by_alias=True)


class TextContent(BaseModel):
    """A single text item of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Result envelope returned for a tool invocation."""

    content: list[TextContent] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> ToolResult:
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        """Concatenated text of all content items."""
        return "".join(item.text for item in self.content)


class BaseTool(ABC):
    """Abstract base class for all tools.

    Subclasses provide a name, a description, an argument model and a
    synchronous ``execute`` producing text. ``run`` validates raw arguments
    against the argument model and wraps the text in a ``ToolResult``.
    """

    def __init__(self) -> None:
        # dict keeps insertion order and drops repeats
        self._dependencies: dict[str, None] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description."""
        ...

    @property
    def arguments_model(self) -> type[BaseModel]:
        """Pydantic model describing accepted arguments."""
        return EmptyArguments

    @property
    def input_schema(self) -> dict[str, Any]:
        """Object-shaped JSON Schema for the arguments."""
        schema = self.arguments_model.model_json_schema()
        schema.pop("title", None)
        schema["type"] = "object"
        schema.setdefault("properties", {})
        return schema

    @property
    def dependencies(self) -> tuple[str, ...]:
        """Names of tools this tool expects to be called before it."""
        return tuple(self._dependencies)

    def add_dependency(self, tool_name: str) -> None:
        self._dependencies[tool_name] = None

    def add_dependencies(self, tool_names: Iterable[str]) -> None:
        for tool_name in tool_names:
            self.add_dependency(tool_name)

    def describe(self) -> ToolDescriptor:
        """Get tool descriptor."""
        return ToolDescriptor(
            name=self.name,
            description=self.description + self._dependency_info(),
            input_schema=self.input_schema,
        )

    def validate_arguments(self, arguments: Mapping[str, Any] | None) -> BaseModel:
        """Validate raw arguments against the argument model."""
        try:
            return self.arguments_model.model_validate(dict(arguments or {}))
        except ValidationError as e:
            raise ArgumentValidationError(
                f"Invalid arguments for {self.name}: {e}"
            ) from e

    @abstractmethod
    def execute(self, arguments: BaseModel) -> str:
        """Execute the tool with validated arguments."""
        ...

    def run(self, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        """Validate arguments, execute and wrap the text result."""
        validated = self.validate_arguments(arguments)
        return ToolResult.from_text(self.execute(validated))

    def _dependency_info(self) -> str:
        if not self._dependencies:
            return ""
        listing = "\n\n".join(f"  > {name}" for name in self._dependencies)
        return f"\n\n\n{DEPENDENCY_HEADER}\n\n{listing}."
