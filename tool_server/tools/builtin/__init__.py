"""Built-in tool implementations."""

from tool_server.tools.base import BaseTool
from tool_server.tools.builtin.user_search import SearchUserArguments, SearchUserTool

__all__ = ["SearchUserArguments", "SearchUserTool", "get_default_tools"]


def get_default_tools() -> list[BaseTool]:
    """Get list of tools served by default."""
    return [
        SearchUserTool(),
    ]
