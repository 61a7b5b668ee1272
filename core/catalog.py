# =============================================================================
# core/catalog.py  -  The Four Tools of the Capital Agent
# =============================================================================
#
# Builds the ToolRegistry the rest of the program uses.  Each tool gets:
#   - an input model (the argument contract the model must satisfy)
#   - a description (the model reads this to decide WHEN to call the tool)
#   - a handler bound to the knowledge tables and weather settings
#
# Registration order is the order the tools are advertised to the model.
# =============================================================================

from functools import partial
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.config import WeatherSettings
from core.knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase
from core.lookups import get_capital_city, get_list_of_countries, get_population_country
from core.registry import ToolDescriptor, ToolRegistry
from core.weather import Opener, get_temperature_for_capital


class _ToolArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")


class CapitalArgs(_ToolArgs):
    country: str = Field(..., description="The country to get the capital of.")


class PopulationArgs(_ToolArgs):
    country: str = Field(..., description="The country to get the population of.")


class TemperatureArgs(_ToolArgs):
    city: str = Field(..., description="The capital city to get the temperature of.")


class NoArgs(_ToolArgs):
    pass


CAPITAL_TOOL = "get_capital_city"
POPULATION_TOOL = "get_population_country"
COUNTRY_LIST_TOOL = "get_list_of_countries"
TEMPERATURE_TOOL = "get_temperature_for_capital"

TOOL_DESCRIPTIONS = {
    CAPITAL_TOOL: "Retrieves the capital city for a given country.",
    POPULATION_TOOL: "Retrieves the population number for a given country.",
    COUNTRY_LIST_TOOL: (
        "Retrieves the list of countries for which we can provide the capital, "
        "population, and temperature."
    ),
    TEMPERATURE_TOOL: "Retrieves the current temperature for a given capital city.",
}


def build_registry(
    settings: Optional[WeatherSettings] = None,
    knowledge: Optional[KnowledgeBase] = None,
    opener: Optional[Opener] = None,
) -> ToolRegistry:
    """Create a registry holding the capital, population, country-list and
    temperature tools, in that order."""
    kb = knowledge or DEFAULT_KNOWLEDGE
    settings = settings or WeatherSettings()

    registry = ToolRegistry()
    registry.register(ToolDescriptor(
        name=CAPITAL_TOOL,
        description=TOOL_DESCRIPTIONS[CAPITAL_TOOL],
        input_model=CapitalArgs,
        handler=partial(get_capital_city, knowledge=kb),
    ))
    registry.register(ToolDescriptor(
        name=POPULATION_TOOL,
        description=TOOL_DESCRIPTIONS[POPULATION_TOOL],
        input_model=PopulationArgs,
        handler=partial(get_population_country, knowledge=kb),
    ))
    registry.register(ToolDescriptor(
        name=COUNTRY_LIST_TOOL,
        description=TOOL_DESCRIPTIONS[COUNTRY_LIST_TOOL],
        input_model=NoArgs,
        handler=partial(get_list_of_countries, knowledge=kb),
    ))
    registry.register(ToolDescriptor(
        name=TEMPERATURE_TOOL,
        description=TOOL_DESCRIPTIONS[TEMPERATURE_TOOL],
        input_model=TemperatureArgs,
        handler=partial(get_temperature_for_capital, settings=settings, knowledge=kb, opener=opener),
    ))
    return registry
