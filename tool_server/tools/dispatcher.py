"""Dispatch tool invocations to registered tools."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tool_server.errors import ToolExecutionError, ToolNotFoundError
from tool_server.tools.base import ToolResult
from tool_server.tools.registry import ToolRegistry


class ToolDispatcher:
    """Single entry point for invoking a named tool.

    Holds no state of its own; every lookup goes through the registry.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    def run(self, tool_name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        """Run a tool by name.

        Raises:
            ToolNotFoundError: no tool is registered under ``tool_name``
            ToolExecutionError: the tool failed; wraps the original error
        """
        tool = self.registry.get(tool_name)
        if tool is None:
            raise ToolNotFoundError(tool_name)

        try:
            return tool.run(arguments)
        except Exception as e:
            raise ToolExecutionError(tool_name, e) from e
