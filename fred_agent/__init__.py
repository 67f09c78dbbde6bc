# =============================================================================
# fred_agent/__init__.py
# =============================================================================
# A demo MCP host: a Google ADK agent that answers economic questions by
# calling the FRED tools.
#
# The agent never imports fred_core or fred_tools.  It launches the server
# as a subprocess and discovers "search" and "series" over stdio, exactly
# as any other MCP host (Claude Desktop, an IDE, ...) would.
#
# Install with the "agent" extra:  pip install -e ".[agent]"
# =============================================================================
