"""Tool registry for looking up tools and their descriptors."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from tool_server.errors import DuplicateToolError, RegistryError
from tool_server.tools.base import BaseTool, ToolDescriptor

logger = structlog.get_logger()


class ToolRegistry:
    """Registry mapping tool names to tool instances.

    Built once at startup and read-only afterwards. Each tool's descriptor
    is computed when the tool is registered and served from that snapshot.
    """

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}
        self._descriptors: dict[str, ToolDescriptor] = {}
        self._initialized = False
        self._log = logger.bind(component="tool_registry")

    def initialize(self, tools: Iterable[BaseTool]) -> None:
        """Register the startup tool set. Allowed once per registry."""
        if self._initialized:
            raise RegistryError("Tool registry is already initialized")

        for tool in tools:
            self.register(tool)

        self._initialized = True
        self._log.info("Initialized tool registry", tools=self.tool_names)

    def register(self, tool: BaseTool) -> None:
        """Register a tool."""
        if not tool.name:
            raise RegistryError(f"Tool {type(tool).__name__} has an empty name")

        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)

        descriptor = tool.describe()
        self._tools[tool.name] = tool
        self._descriptors[tool.name] = descriptor
        self._log.debug(
            "Registered tool",
            tool=tool.name,
            dependencies=list(tool.dependencies),
        )

    def get(self, tool_name: str) -> BaseTool | None:
        """Get a tool by name."""
        return self._tools.get(tool_name)

    def get_descriptor(self, tool_name: str) -> ToolDescriptor | None:
        """Get the cached descriptor of a tool."""
        return self._descriptors.get(tool_name)

    def list_descriptors(self) -> list[ToolDescriptor]:
        """Get descriptors of all tools in registration order."""
        return list(self._descriptors.values())

    @property
    def descriptors(self) -> dict[str, ToolDescriptor]:
        """Mapping of tool name to descriptor."""
        return dict(self._descriptors)

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def tool_names(self) -> list[str]:
        """Get list of registered tool names."""
        return list(self._tools.keys())

    def __contains__(self, tool_name: str) -> bool:
        return tool_name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
