"""
Closed set of flavor dimensions. Declaration order is the canonical vector index
and the tie-break order for shared-dimension ranking.
"""
from enum import Enum
from typing import Optional


class FlavorDimension(str, Enum):
    SWEETNESS = "sweetness"
    SALTINESS = "saltiness"
    ACIDITY = "acidity"
    BITTERNESS = "bitterness"
    UMAMI = "umami"
    SPICE_HEAT = "spice_heat"
    FATTINESS = "fattiness"
    AROMATIC = "aromatic"
    HERBAL = "herbal"
    SMOKINESS = "smokiness"

    @property
    def index(self) -> int:
        return _INDEX[self]

    @property
    def label(self) -> str:
        """Display label, e.g. spice_heat -> Spice Heat."""
        return self.value.replace("_", " ").title()


FLAVOR_DIMENSIONS: tuple[FlavorDimension, ...] = tuple(FlavorDimension)
DIMENSION_COUNT = len(FLAVOR_DIMENSIONS)

_INDEX: dict[FlavorDimension, int] = {dim: i for i, dim in enumerate(FLAVOR_DIMENSIONS)}

# Accepted spellings in data files (normalized key -> dimension)
_ALIASES: dict[str, FlavorDimension] = {
    "sweet": FlavorDimension.SWEETNESS,
    "salty": FlavorDimension.SALTINESS,
    "salt": FlavorDimension.SALTINESS,
    "sour": FlavorDimension.ACIDITY,
    "sourness": FlavorDimension.ACIDITY,
    "bitter": FlavorDimension.BITTERNESS,
    "savory": FlavorDimension.UMAMI,
    "spicy": FlavorDimension.SPICE_HEAT,
    "spice": FlavorDimension.SPICE_HEAT,
    "heat": FlavorDimension.SPICE_HEAT,
    "fat": FlavorDimension.FATTINESS,
    "fatty": FlavorDimension.FATTINESS,
    "richness": FlavorDimension.FATTINESS,
    "aroma": FlavorDimension.AROMATIC,
    "aromatic_intensity": FlavorDimension.AROMATIC,
    "herb": FlavorDimension.HERBAL,
    "herbaceous": FlavorDimension.HERBAL,
    "smoky": FlavorDimension.SMOKINESS,
    "smoke": FlavorDimension.SMOKINESS,
}


def parse_dimension(name: str) -> Optional[FlavorDimension]:
    """
    Resolve a dimension name from data files.
    Case-insensitive; spaces and hyphens are treated as underscores. Returns None if unknown.
    """
    if isinstance(name, FlavorDimension):
        return name
    if not name or not isinstance(name, str):
        return None
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return FlavorDimension(key)
    except ValueError:
        return _ALIASES.get(key)
