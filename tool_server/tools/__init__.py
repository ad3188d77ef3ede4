"""Tool system - Registry, dispatcher, base interfaces, and tool implementations."""

from tool_server.tools.base import BaseTool, ToolDescriptor, ToolResult
from tool_server.tools.dispatcher import ToolDispatcher
from tool_server.tools.registry import ToolRegistry

__all__ = ["BaseTool", "ToolDescriptor", "ToolDispatcher", "ToolRegistry", "ToolResult"]
