# =============================================================================
# fred_tools/dispatcher.py  —  Routing Tool Calls to Handlers
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Answers the two questions an MCP host asks:
#     - "which tools do you have?"   → list_tools()
#     - "run this tool with these arguments" → call_tool()
#
# HOW IT WORKS (the flow):
#   1. Look the tool up by exact name in a dict built once at startup
#   2. Await its handler (one GET to FRED, one field of the body)
#   3. Wrap the outcome in a ToolResponse:
#        success → pretty-printed JSON (2-space indent) in one text block
#        failure → "FRED API error: <message>" with is_error=True
#        unknown → "Unknown tool: <name>" with is_error=True
#
#   call_tool() NEVER raises for a tool failure.  The host gets an ordinary
#   value back and the server keeps serving the next call.
#
# LOGGING:
#   Same colour scheme as the rest of the server's stderr output:
#     - CYAN for incoming requests (tool name + arguments)
#     - GREEN for response JSON
#     - YELLOW for status and error messages
#   stdout is the MCP stream, so nothing here prints.
# =============================================================================

import json
import logging
from typing import Any, Mapping, Optional, Sequence

from fred_core.errors import UnknownToolError
from fred_core.models import ToolDescriptor, ToolResponse

ERROR_PREFIX = "FRED API error: "

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/errors
_RESET = "\033[0m"


def _log_request(tool_name: str, arguments: Mapping[str, Any]) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log a status or error message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, response: ToolResponse) -> ToolResponse:
    """Log the envelope as compact JSON in GREEN, then return it."""
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(response.to_dict(), separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return response


class Dispatcher:
    """Routes tool calls by name and normalizes their results."""

    def __init__(self, registry: Sequence[ToolDescriptor]) -> None:
        self._registry = tuple(registry)
        self._by_name: dict[str, ToolDescriptor] = {}
        for descriptor in self._registry:
            if descriptor.name in self._by_name:
                raise ValueError(f"Duplicate tool name: {descriptor.name}")
            self._by_name[descriptor.name] = descriptor

    @property
    def registry(self) -> tuple[ToolDescriptor, ...]:
        return self._registry

    def list_tools(self) -> list[dict[str, Any]]:
        """Name, description and schema of every tool, in registry order."""
        return [descriptor.to_listing() for descriptor in self._registry]

    async def call_tool(
        self, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> ToolResponse:
        """Run one tool and return its envelope.

        Args:
            name: Exact tool name ("search" or "series").
            arguments: The tool's argument object; None is treated as {}.

        Returns:
            A ToolResponse.  Unknown tools and handler failures come back
            with is_error=True instead of raising.
        """
        arguments = arguments or {}
        _log_request(name, arguments)

        descriptor = self._by_name.get(name)
        if descriptor is None:
            error = UnknownToolError(name)
            _log_status(str(error))
            return _log_response(name, ToolResponse.failure(str(error)))

        try:
            result = await descriptor.handler(arguments)
        except Exception as exc:
            _log_status(f"{type(exc).__name__}: {exc}")
            return _log_response(name, ToolResponse.failure(f"{ERROR_PREFIX}{exc}"))

        if isinstance(result, list):
            _log_status(f"Got {len(result)} records")
        elif result is None:
            _log_status("Upstream response did not contain the expected field")
        return _log_response(name, ToolResponse.success(result))
