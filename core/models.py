# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These types define the shape of every piece of information that flows
# between the knowledge tables, the tools, and the agent runtime.
#
# THE TOOL RESULT CONTRACT:
#   Every tool returns a dict with a single "result" key.  Lookup misses and
#   weather API failures are NOT raised: they come back as a normal result
#   whose text explains what went wrong.  The agent reads that sentence and
#   carries on with the conversation.
# =============================================================================

from dataclasses import dataclass
from typing import Any


# A tool result is always {"result": <value>}.  The value is a sentence for
# every tool except get_list_of_countries, which returns the list itself.
ToolResult = dict[str, Any]


def tool_result(value: Any) -> ToolResult:
    """Wrap a value in the single-field dict every tool returns."""
    return {"result": value}


# -----------------------------------------------------------------------------
# Coordinate - where a city is, in decimal degrees
# -----------------------------------------------------------------------------
# Frozen so a Coordinate taken from the city table can be shared between
# concurrent weather calls without copying.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees."""

    latitude: float
    longitude: float
