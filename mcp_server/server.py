"""MCP server exposing the toolbox operations over stdio.

The dispatcher does the real work; this module only maps it onto the MCP
``tools/list`` and ``tools/call`` requests.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from mcp import Tool
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData, TextContent

from config.settings import settings
from dispatch.dispatcher import Dispatcher, build_default_dispatcher
from models.errors import FailureKind, OperationFailure

logger = logging.getLogger(__name__)

# Failure kind -> JSON-RPC error code
ERROR_CODES: Dict[FailureKind, int] = {
    FailureKind.UNKNOWN_OPERATION: METHOD_NOT_FOUND,
    FailureKind.INVALID_ARGUMENTS: INVALID_PARAMS,
    FailureKind.EXECUTION_ERROR: INTERNAL_ERROR,
}


def to_mcp_error(failure: OperationFailure) -> McpError:
    """Translate a typed failure into the protocol's error representation."""
    return McpError(
        ErrorData(code=ERROR_CODES[failure.kind], message=failure.message, data=failure.to_dict())
    )


def create_server(dispatcher: Optional[Dispatcher] = None) -> Server:
    """Build an MCP server around a dispatcher.

    Args:
        dispatcher: Operation registry. If None, the default operations are used.

    Returns:
        Configured (not yet running) MCP server
    """
    if dispatcher is None:
        dispatcher = build_default_dispatcher()

    app = Server(settings.server_name, version=settings.server_version)

    @app.list_tools()
    async def list_tools() -> List[Tool]:
        """Advertise every registered operation."""
        return [
            Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=dict(descriptor.input_schema),
            )
            for descriptor in dispatcher.list_operations()
        ]

    # The SDK's JSON-schema check would reject string booleans before the
    # operation schema gets to coerce them.
    @app.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        """Run an operation and return its text content."""
        try:
            result = dispatcher.invoke(name, arguments)
        except OperationFailure as e:
            raise to_mcp_error(e) from e

        return [TextContent(type="text", text=item.text) for item in result.content]

    return app


def configure_logging() -> None:
    """Send log records to stderr; stdout carries the protocol."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


async def main():
    """Run the MCP server on stdio."""
    configure_logging()

    app = create_server()
    if settings.is_development:
        print(
            f"✓ {settings.server_name} {settings.server_version} started",
            file=sys.stderr,
            flush=True,
        )

    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
