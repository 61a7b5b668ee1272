# =============================================================================
# core/lookups.py  -  Capital, Population and Country-List Lookups
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers the three table questions the agent can ask:
#     - "What is the capital of X?"
#     - "How many people live in X?"
#     - "Which countries do you know about?"
#
# THE MISS POLICY:
#   An unknown country is not an error.  The tool answers with an apology
#   that echoes the caller's ORIGINAL text (not the normalized key), so the
#   model can quote it back to the user verbatim.
# =============================================================================

from typing import Optional

from core.knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase, normalize_key
from core.models import ToolResult, tool_result


def get_capital_city(country: str, knowledge: Optional[KnowledgeBase] = None) -> ToolResult:
    """Return the capital city of a country.

    Args:
        country: Country name in any casing, e.g. "France" or " japan ".
        knowledge: Tables to read from (defaults to the built-in ones).

    Returns:
        {"result": "<capital>"} on a hit, or an apology sentence naming
        the country exactly as it was passed in.
    """
    kb = knowledge or DEFAULT_KNOWLEDGE
    capital = kb.capitals.get(normalize_key(country))
    if capital is None:
        return tool_result(f"Sorry, I don't know the capital of {country}.")
    return tool_result(capital)


def get_population_country(country: str, knowledge: Optional[KnowledgeBase] = None) -> ToolResult:
    """Return the population figure of a country.

    The figure is the display string stored in the table (e.g. "39 million").
    """
    kb = knowledge or DEFAULT_KNOWLEDGE
    population = kb.populations.get(normalize_key(country))
    if population is None:
        return tool_result(f"Sorry, I don't know the population number of {country}.")
    return tool_result(population)


def get_list_of_countries(knowledge: Optional[KnowledgeBase] = None) -> ToolResult:
    """Return every country the other tools can answer for, in table order."""
    kb = knowledge or DEFAULT_KNOWLEDGE
    return tool_result(kb.countries())
