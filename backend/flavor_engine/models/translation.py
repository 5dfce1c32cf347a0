"""
Structured translation output. Value objects owned by the caller; nothing here is persisted.
"""
from dataclasses import dataclass, field
from typing import Any

from flavor_engine.flavor.dimensions import FlavorDimension
from flavor_engine.flavor.similarity import to_percent
from flavor_engine.flavor.vector import FlavorVector
from flavor_engine.models.dish import Dish

# Vector components are rounded for the wire; scoring always uses full precision
_DISPLAY_DIGITS = 1


@dataclass(frozen=True)
class ScoredCandidate:
    dish: Dish
    similarity: float  # [0, 1]
    shared_dimensions: list[FlavorDimension]
    vector: FlavorVector  # normalized

    @property
    def percent(self) -> int:
        return to_percent(self.similarity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dish": self.dish.to_dict(),
            "similarity": self.percent,
            "shared_traits": [d.value for d in self.shared_dimensions],
            "vector": self.vector.to_dict(_DISPLAY_DIGITS),
        }


@dataclass(frozen=True)
class TranslationResult:
    source: Dish
    target: Dish
    similarity: int  # percentage, [0, 100]
    shared_dimensions: list[FlavorDimension] = field(default_factory=list)
    source_vector: FlavorVector = field(default_factory=FlavorVector.zero)  # normalized
    target_vector: FlavorVector = field(default_factory=FlavorVector.zero)  # normalized

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": {**self.source.to_dict(), "vector": self.source_vector.to_dict(_DISPLAY_DIGITS)},
            "target": {**self.target.to_dict(), "vector": self.target_vector.to_dict(_DISPLAY_DIGITS)},
            "similarity": self.similarity,
            "shared_traits": [d.value for d in self.shared_dimensions],
        }


@dataclass(frozen=True)
class FlavorProfile:
    raw: FlavorVector
    normalized: FlavorVector
    matched: list[str] = field(default_factory=list)
    unmatched: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "raw": self.raw.to_dict(4),
            "normalized": self.normalized.to_dict(_DISPLAY_DIGITS),
            "matched_ingredients": list(self.matched),
            "unmatched_ingredients": list(self.unmatched),
        }
