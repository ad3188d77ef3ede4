"""Error types raised by the tool server."""

from __future__ import annotations


class ToolServerError(Exception):
    """Base class for tool server errors."""


class RegistryError(ToolServerError):
    """Invalid registry operation (bad tool name, repeated initialization)."""


class DuplicateToolError(RegistryError):
    """A tool with the same name is already registered."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool {tool_name} is already registered")
        self.tool_name = tool_name


class ToolNotFoundError(ToolServerError):
    """No tool is registered under the requested name."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool {tool_name} not found")
        self.tool_name = tool_name


class ExecutionError(ToolServerError):
    """Raised by a tool when its own logic fails."""


class ArgumentValidationError(ExecutionError):
    """Arguments did not match the tool's argument schema."""


class ToolExecutionError(ToolServerError):
    """A registered tool failed while running."""

    def __init__(self, tool_name: str, original: BaseException) -> None:
        super().__init__(f"Failed to run tool {tool_name}: {error_message(original)}")
        self.tool_name = tool_name
        self.original = original


def error_message(error: BaseException) -> str:
    """Message of an exception without the repr quoting some types add."""
    if len(error.args) == 1 and isinstance(error.args[0], str):
        return error.args[0]
    return str(error)
