# =============================================================================
# fred_tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the FRED tool registry over MCP (stdio transport) with FastMCP.
#
# WHY NOT @mcp.tool() ON PLAIN FUNCTIONS?
#   FastMCP normally derives a tool's schema from the function signature.
#   Here the schema IS the contract (camelCase names, exact enums), so each
#   registry entry is registered as a FredTool whose `parameters` are the
#   registry schema verbatim, and whose run() hands off to the Dispatcher.
#   The Dispatcher builds the envelope.  A failure envelope is re-raised as
#   ToolError, which FastMCP reports to the host as isError=true with the
#   same text.
#
# RUNNING THIS SERVER:
#   a) fred-mcp-server                    (console script)
#   b) python -m fred_tools.mcp_server
#   c) spawned by the demo agent (fred_agent/) over stdio
#
#   FRED_API_KEY must be set (or present in .env); without it the process
#   exits with status 1 before serving anything.
# =============================================================================

import logging
import sys
from typing import Any, Optional

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from fred_core.config import Settings, load_settings
from fred_core.errors import ConfigurationError
from fred_core.fred_client import FredClient
from fred_core.registry import build_registry
from fred_tools.dispatcher import Dispatcher

SERVER_NAME = "fred-mcp-server"
SERVER_VERSION = "0.1.0"


def configure_logging(level: str = "INFO") -> None:
    """Send logs to STDERR; STDOUT carries the MCP JSON-RPC stream."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    # httpx logs every request URL at INFO, and FRED URLs contain the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# FredTool — one registry entry as a FastMCP tool
# =============================================================================
class FredTool(Tool):
    """A FastMCP tool that delegates to the Dispatcher by name."""

    dispatcher: Any = Field(exclude=True, repr=False)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        response = await self.dispatcher.call_tool(self.name, arguments)
        if response.is_error:
            raise ToolError(response.text)
        return ToolResult(
            content=[TextContent(type="text", text=block.text) for block in response.content]
        )


# =============================================================================
# Server factory
# =============================================================================
def create_server(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """Wire client → registry → dispatcher → FastMCP.

    Args:
        settings: Startup configuration (API key, base URL).
        transport: Optional httpx transport, used by tests to mock FRED.
    """
    client = FredClient(settings.api_key, base_url=settings.base_url, transport=transport)
    dispatcher = Dispatcher(build_registry(client))
    logging.debug(f"Using {client.describe()}")

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for descriptor in dispatcher.registry:
        mcp.add_tool(
            FredTool(
                name=descriptor.name,
                description=descriptor.description,
                parameters=descriptor.to_listing()["inputSchema"],
                dispatcher=dispatcher,
            )
        )
    return mcp


# =============================================================================
# Entry point
# =============================================================================
def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        configure_logging()
        logging.error(str(exc))
        sys.exit(1)

    configure_logging(settings.log_level)
    mcp = create_server(settings)

    logging.info("FRED MCP server running on stdio")
    try:
        mcp.run()
    except KeyboardInterrupt:
        logging.info("Interrupted, shutting down")
    except Exception:
        logging.exception("[MCP Error]")
        raise


if __name__ == "__main__":
    main()
