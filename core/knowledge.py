# =============================================================================
# core/knowledge.py  -  Static Knowledge Tables
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the reference data every lookup tool reads from:
#     - country -> capital city
#     - country -> population figure
#     - city    -> coordinates (for the weather tool)
#
# RULES FOR THE TABLES:
#   - Keys are lower-case.  Callers normalize their input with normalize_key()
#     before looking anything up.
#   - The tables are wrapped in MappingProxyType, so they are read-only
#     after import.  Handlers running concurrently never need a lock.
#   - Insertion order is meaningful: get_list_of_countries returns the
#     countries in the order they appear in CAPITALS.
# =============================================================================

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from core.models import Coordinate


CAPITALS: Mapping[str, str] = MappingProxyType({
    "france": "Paris",
    "japan": "Tokyo",
    "canada": "Ottawa",
    "portugal": "Lisbon",
})

# Figures are strings, not numbers: they are read back to the user as-is.
POPULATIONS: Mapping[str, str] = MappingProxyType({
    "france": "66 milion",
    "japan": "123 million",
    "canada": "39 million",
    "portugal": "10 million",
})

CITY_COORDINATES: Mapping[str, Coordinate] = MappingProxyType({
    "paris": Coordinate(latitude=48.85, longitude=2.35),
    "tokyo": Coordinate(latitude=35.68, longitude=139.69),
    "ottawa": Coordinate(latitude=45.42, longitude=-75.69),
    "lisbon": Coordinate(latitude=38.72, longitude=-9.14),
})


def normalize_key(value: str) -> str:
    """Case-fold and trim a user-supplied name so it matches the table keys."""
    return value.strip().lower()


# -----------------------------------------------------------------------------
# KnowledgeBase - the three tables bundled together
# -----------------------------------------------------------------------------
# Lookup functions take a KnowledgeBase instead of reaching for the module
# globals directly.  Production code uses DEFAULT_KNOWLEDGE; tests can hand
# in their own tables.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class KnowledgeBase:
    """Read-only bundle of the capital, population and coordinate tables."""

    capitals: Mapping[str, str] = field(default_factory=lambda: CAPITALS)
    populations: Mapping[str, str] = field(default_factory=lambda: POPULATIONS)
    coordinates: Mapping[str, Coordinate] = field(default_factory=lambda: CITY_COORDINATES)

    def countries(self) -> list[str]:
        """Known country keys, in table order."""
        return list(self.capitals)


DEFAULT_KNOWLEDGE = KnowledgeBase()
