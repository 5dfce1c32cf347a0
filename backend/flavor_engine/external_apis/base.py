"""
Types for remote dish resolution.
"""
from dataclasses import dataclass
from typing import Optional

from flavor_engine.models.dish import Dish


@dataclass
class RecipeLookupResult:
    """Result of resolving a free-text dish name against the remote recipe service."""
    dish: Optional[Dish]
    source: str  # "recipe_api" | "none"
    raw_response_summary: str = ""  # for logging

    @property
    def found(self) -> bool:
        return self.dish is not None
