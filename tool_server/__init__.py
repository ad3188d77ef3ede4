"""MCP tool server speaking over stdio."""

__version__ = "1.0.0"
