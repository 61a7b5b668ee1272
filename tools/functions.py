# =============================================================================
# tools/functions.py  -  The Callable Tool Surface
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the four functions the agent can call.  Each one is a thin,
#   typed wrapper that:
#     1. logs the incoming call
#     2. dispatches it through the ToolRegistry (validation + handler)
#     3. logs and returns the {"result": ...} dict
#
#   The same functions are used by both transports:
#     - in-process: handed straight to the ADK Agent as function tools
#     - MCP:        registered on the FastMCP server in tools/mcp_server.py
#
# WHY SIGNATURES AND DOCSTRINGS MATTER HERE:
#   ADK and FastMCP both build the tool declaration the model sees from the
#   function name, its typed parameters, and its docstring.  The wording
#   below matches the registry descriptions in core/catalog.py.
# =============================================================================

import asyncio
import json
import logging
import threading
from typing import Optional

from core.catalog import (
    CAPITAL_TOOL,
    COUNTRY_LIST_TOOL,
    POPULATION_TOOL,
    TEMPERATURE_TOOL,
    build_registry,
)
from core.config import WeatherSettings
from core.registry import ToolRegistry

logger = logging.getLogger(__name__)

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_RESET = "\033[0m"

_registry: Optional[ToolRegistry] = None
_registry_lock = threading.Lock()


def configure(registry: Optional[ToolRegistry]) -> None:
    """Install the registry every tool function dispatches through.

    Passing None drops it; the next call rebuilds one from the environment.
    """
    global _registry
    with _registry_lock:
        _registry = registry


def get_registry() -> ToolRegistry:
    """Return the installed registry, building one from the environment if needed."""
    global _registry
    # the weather tool runs in worker threads, so two first calls can race
    with _registry_lock:
        if _registry is None:
            _registry = build_registry(WeatherSettings.from_env())
        return _registry


def _log_request(tool_name: str, **params) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    logger.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result


def _call(tool_name: str, **args) -> dict:
    _log_request(tool_name, **args)
    result = get_registry().dispatch(tool_name, args)
    return _log_response(tool_name, result)


# =============================================================================
# The tools
# =============================================================================
def get_capital_city(country: str) -> dict:
    """Retrieves the capital city for a given country.

    Args:
        country: The country to get the capital of.

    Returns:
        A dict {"result": <capital city>}, or an apology in "result" if the
        country is unknown.
    """
    return _call(CAPITAL_TOOL, country=country)


def get_population_country(country: str) -> dict:
    """Retrieves the population number for a given country.

    Args:
        country: The country to get the population of.

    Returns:
        A dict {"result": <population figure, e.g. "39 million">}, or an
        apology in "result" if the country is unknown.
    """
    return _call(POPULATION_TOOL, country=country)


def get_list_of_countries() -> dict:
    """Retrieves the list of countries for which we can provide the capital, population, and temperature.

    Returns:
        A dict {"result": [<country>, ...]} with lower-case country names.
    """
    return _call(COUNTRY_LIST_TOOL)


async def get_temperature_for_capital(city: str) -> dict:
    """Retrieves the current temperature for a given capital city.

    Args:
        city: The capital city to get the temperature of.

    Returns:
        A dict {"result": "The current temperature in <city> is <t>°C."},
        or a message in "result" explaining why it could not be fetched.
    """
    # blocking HTTP call: keep it off the event loop
    return await asyncio.to_thread(_call, TEMPERATURE_TOOL, city=city)


TOOL_FUNCTIONS = [
    get_capital_city,
    get_population_country,
    get_list_of_countries,
    get_temperature_for_capital,
]
