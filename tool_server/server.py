"""MCP stdio transport for the tool registry and dispatcher."""

from __future__ import annotations

import signal
import sys
from io import TextIOWrapper
from typing import Any, TextIO

import anyio
import anyio.to_thread
import mcp.types as types
import structlog
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from tool_server.tools.builtin import get_default_tools
from tool_server.tools.dispatcher import ToolDispatcher
from tool_server.tools.registry import ToolRegistry
from tool_server.utils.config import Settings

logger = structlog.get_logger()


class ToolServer:
    """Binds a tool registry and dispatcher to an MCP server.

    ``tools/list`` is answered from the registry's cached descriptors and
    ``tools/call`` goes through the dispatcher. Errors raised by a call are
    logged and re-raised; the MCP server turns them into an error result
    and keeps serving.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        dispatcher: ToolDispatcher,
        name: str = "my-mcp-server",
        version: str = "1.0.0",
    ) -> None:
        self.registry = registry
        self.dispatcher = dispatcher
        self.name = name
        self.version = version
        self.server: Server = Server(name, version=version)
        self._log = logger.bind(component="tool_server", server=name)
        self._received_signal: signal.Signals | None = None

        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)

    async def list_tools(self) -> list[types.Tool]:
        """Return descriptors of all registered tools."""
        return [
            types.Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.input_schema,
            )
            for descriptor in self.registry.list_descriptors()
        ]

    async def call_tool(
        self,
        name: str,
        arguments: dict[str, Any] | None,
    ) -> list[types.TextContent]:
        """Run a tool and convert its result to MCP content."""
        self._log.debug("Calling tool", tool=name)

        try:
            result = self.dispatcher.run(name, arguments or {})
        except Exception as e:
            self._log.error("Tool call failed", tool=name, error=str(e))
            raise

        return [types.TextContent(type="text", text=item.text) for item in result.content]

    def initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=self.name,
            server_version=self.version,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )

    async def run_stdio(self) -> signal.Signals | None:
        """Serve over stdin/stdout until the client disconnects or a signal arrives.

        Returns the signal that stopped the server, or None when the client
        closed stdin.
        """
        self._received_signal = None
        stdin = StdinLines(TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace"))

        async with anyio.create_task_group() as tg:
            tg.start_soon(self._watch_signals, tg.cancel_scope)

            async with stdio_server(stdin=stdin) as (read_stream, write_stream):
                self._log.info("Server started", version=self.version, tools=len(self.registry))
                await self.server.run(read_stream, write_stream, self.initialization_options())

            tg.cancel_scope.cancel()

        self._log.info("Server stopped")
        return self._received_signal

    async def _watch_signals(self, scope: anyio.CancelScope) -> None:
        with anyio.open_signal_receiver(signal.SIGINT, signal.SIGTERM) as signals:
            async for signum in signals:
                self._received_signal = signal.Signals(signum)
                self._log.info("Received signal, shutting down", signal=self._received_signal.name)
                scope.cancel()
                return


class StdinLines:
    """Async line iterator over a text stream.

    A pending read is abandoned on cancellation, so a client that keeps
    stdin open cannot hold up shutdown.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def __aiter__(self) -> StdinLines:
        return self

    async def __anext__(self) -> str:
        line = await anyio.to_thread.run_sync(self.stream.readline, abandon_on_cancel=True)
        if not line:
            raise StopAsyncIteration
        return line


def build_server(settings: Settings) -> ToolServer:
    """Create the registry with the default tools and wrap it in a server."""
    registry = ToolRegistry()
    registry.initialize(get_default_tools())

    return ToolServer(
        registry=registry,
        dispatcher=ToolDispatcher(registry),
        name=settings.server_name,
        version=settings.server_version,
    )
