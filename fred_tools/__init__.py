# =============================================================================
# fred_tools/__init__.py
# =============================================================================
# The MCP translation layer between an agent host and fred_core.
#
#   dispatcher.py  → name lookup + success/failure envelopes (no MCP imports)
#   mcp_server.py  → FastMCP server, stdio entry point, logging setup
#
# WHAT THIS LAYER DOES NOT DO:
#   - It does NOT build FRED queries (that's fred_core/registry.py)
#   - It does NOT talk HTTP (that's fred_core/fred_client.py)
#   - It does NOT reshape observations; results pass through as JSON
# =============================================================================
