# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the "translation layer" between the agent framework and
# the core logic:
#
#   functions.py   typed tool functions that dispatch through the registry
#   mcp_server.py  a FastMCP server exposing those same functions over MCP
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain lookup or weather logic (that's in core/)
#   - They do NOT make decisions (that's the agent's job)
# =============================================================================
