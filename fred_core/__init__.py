# =============================================================================
# fred_core/__init__.py
# =============================================================================
# This package contains everything the FRED tools actually DO.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, the MCP SDK, or Google ADK.
#   The registry, the HTTP client and the argument models can be exercised
#   from a bare test with a mocked HTTP transport.  The MCP layer
#   (fred_tools/) only wires these pieces to the protocol.
# =============================================================================
