# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Serves the four capital-agent tools over MCP (Model Context Protocol).
#   The agent uses this server when CAPITAL_AGENT_TOOL_TRANSPORT=mcp: ADK
#   starts it as a subprocess and talks to it over stdin/stdout.
#
# HOW IT WORKS (the flow):
#   1. The ADK agent decides it needs information (e.g., a capital)
#   2. It calls a tool by name via MCP (e.g., "get_capital_city")
#   3. FastMCP routes the call to the matching function in tools/functions.py
#   4. That function dispatches through the ToolRegistry and returns
#      {"result": ...}
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server      (from the project root)
# =============================================================================

import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP

from core.catalog import build_registry
from core.config import WeatherSettings
from tools.functions import TOOL_FUNCTIONS, configure

# =============================================================================
# Logging Setup
# =============================================================================
# Log to STDERR: STDOUT carries the MCP JSON messages, and anything else
# written there would corrupt the stream.
# =============================================================================
_LOG_FORMAT = "%(asctime)s [MCP] %(message)s"


def create_server(name: str = "capital-agent") -> FastMCP:
    """Create a FastMCP server exposing every function in TOOL_FUNCTIONS.

    FastMCP derives each tool's name, description and input schema from
    the function itself, so the MCP tools match the in-process ones.
    """
    mcp = FastMCP(name)
    for fn in TOOL_FUNCTIONS:
        mcp.tool()(fn)
    return mcp


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format=_LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    # Settings are parsed here, before the first call, so a bad value stops
    # the server at startup.
    configure(build_registry(WeatherSettings.from_env()))
    create_server().run()


if __name__ == "__main__":
    main()
