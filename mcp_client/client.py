"""MCP client wrapper for communicating with the toolbox MCP server."""

import os
import sys
from contextlib import AsyncExitStack
from pathlib import Path
from typing import Any, Dict, List, Optional

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class ToolCallError(Exception):
    """Raised when the server reports a failed tool call."""

    def __init__(self, tool_name: str, message: str):
        super().__init__(message)
        self.tool_name = tool_name
        self.message = message


class ToolboxMCPClient:
    """Client for communicating with the toolbox MCP server over stdio."""

    def __init__(self, server_params: Optional[StdioServerParameters] = None):
        """Initialize MCP client.

        Args:
            server_params: How to launch the server. If None, runs ``python -m mcp_server``
                from the project root with the current environment.
        """
        self.session: Optional[ClientSession] = None
        self._exit_stack: Optional[AsyncExitStack] = None

        if server_params is None:
            server_params = StdioServerParameters(
                command=sys.executable,
                args=["-m", "mcp_server"],
                env=dict(os.environ),
                cwd=str(PROJECT_ROOT),
            )
        self.server_params = server_params

    async def connect(self):
        """Start the server process and initialize the MCP session."""
        if self.session is not None:
            raise RuntimeError("Client is already connected")

        stack = AsyncExitStack()
        try:
            read_stream, write_stream = await stack.enter_async_context(stdio_client(self.server_params))
            session = await stack.enter_async_context(ClientSession(read_stream, write_stream))
            await session.initialize()
        except BaseException:
            await stack.aclose()
            raise

        self._exit_stack = stack
        self.session = session

    def _require_session(self) -> ClientSession:
        if self.session is None:
            raise RuntimeError("Client is not connected. Call connect() first.")
        return self.session

    async def list_tools(self) -> List[Dict[str, Any]]:
        """List the server's tools.

        Returns:
            Tool definitions (``name``, ``description``, ``inputSchema``) in server order
        """
        result = await self._require_session().list_tools()
        return [
            {"name": tool.name, "description": tool.description, "inputSchema": tool.inputSchema}
            for tool in result.tools
        ]

    async def call_tool(self, tool_name: str, arguments: Dict[str, Any]) -> str:
        """Call an MCP tool and return its text output.

        Args:
            tool_name: Name of the tool to call
            arguments: Tool arguments as a dictionary

        Returns:
            Text of the result's content items, newline-joined

        Raises:
            RuntimeError: If client is not connected
            ToolCallError: If the server reports an error
        """
        result = await self._require_session().call_tool(tool_name, arguments)
        text = "\n".join(item.text for item in result.content if getattr(item, "type", None) == "text")

        if result.isError:
            raise ToolCallError(tool_name, text)

        return text

    async def greet(self, name: str, formal: bool = False) -> str:
        return await self.call_tool("greeting", {"name": name, "formal": formal})

    async def calculate(self, operation: str, a: float, b: float) -> str:
        return await self.call_tool("calculate", {"operation": operation, "a": a, "b": b})

    async def current_datetime(self, format: str = "long", timezone: Optional[str] = None) -> str:
        """Get the current date from the server.

        Args:
            format: One of short, long, time, full, iso
            timezone: IANA timezone; the server default is used if None
        """
        arguments: Dict[str, Any] = {"format": format}
        if timezone is not None:
            arguments["timezone"] = timezone
        return await self.call_tool("datetime", arguments)

    async def close(self):
        """Close the MCP connection and stop the server process."""
        if self._exit_stack is not None:
            await self._exit_stack.aclose()
            self._exit_stack = None
            self.session = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
