"""
Bridge: compose dish resolution (local universe -> remote recipe lookup -> caller-supplied ingredients)
with the pure matcher. Resolution finishes before scoring starts; the matcher never sees the network.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from flavor_engine.config import get_remote_lookup_enabled
from flavor_engine.errors import SourceNotFound
from flavor_engine.external_apis.recipe_lookup import lookup_dish
from flavor_engine.matching.matcher import FlavorMatcher
from flavor_engine.models.dish import DEFAULT_CUISINE, Dish
from flavor_engine.models.translation import ScoredCandidate, TranslationResult
from flavor_engine.models.universe import DishUniverse

logger = logging.getLogger(__name__)

DEFAULT_ALTERNATIVES = 3


@dataclass
class TranslationResponse:
    result: TranslationResult
    alternatives: List[ScoredCandidate] = field(default_factory=list)
    resolved_from: str = "universe"  # universe | recipe_api | user

    def to_dict(self) -> Dict[str, Any]:
        out = self.result.to_dict()
        out["alternatives"] = [c.to_dict() for c in self.alternatives]
        out["resolved_from"] = self.resolved_from
        return out


def dish_from_ingredients(
    name: str,
    ingredients: Sequence[str],
    cuisine: Optional[str] = None,
    image: Optional[str] = None,
) -> Dish:
    """Caller-supplied ingredient list -> Dish, no lookup."""
    return Dish.build(
        name=name or "Custom dish",
        cuisine=cuisine or DEFAULT_CUISINE,
        ingredients=ingredients,
        image=image,
        source="user",
    )


def resolve_source_dish(
    query: str,
    universe: DishUniverse,
    use_remote: Optional[bool] = None,
) -> Dish:
    """
    Resolve: 1) local universe (case-insensitive substring) 2) remote recipe lookup if enabled.
    Raises SourceNotFound when both miss.
    """
    local = universe.find(query)
    if local is not None:
        return local

    remote_allowed = get_remote_lookup_enabled() if use_remote is None else use_remote
    if not remote_allowed:
        logger.info("SOURCE_RESOLVE local_miss remote_disabled query=%s", (query or "")[:60])
        raise SourceNotFound(query)

    lookup = lookup_dish(query)
    if lookup.dish is None:
        logger.info(
            "SOURCE_RESOLVE failed query=%s reason=%s",
            (query or "")[:60], lookup.raw_response_summary,
        )
        raise SourceNotFound(query)
    logger.info("SOURCE_RESOLVE remote query=%s name=%s", (query or "")[:60], lookup.dish.name[:60])
    return lookup.dish


def run_translation(
    matcher: FlavorMatcher,
    query: str,
    target_cuisine: str,
    ingredients: Optional[Sequence[str]] = None,
    use_remote: Optional[bool] = None,
    alternatives: int = DEFAULT_ALTERNATIVES,
) -> TranslationResponse:
    """
    Resolve the source, then translate it into target_cuisine.
    Explicit ingredients skip resolution entirely. Propagates SourceNotFound / NoCandidates.
    """
    if ingredients:
        source = dish_from_ingredients(query, ingredients)
    else:
        if not (query or "").strip():
            raise SourceNotFound(query or "")
        source = resolve_source_dish(query, matcher.universe, use_remote=use_remote)

    result, ranked = matcher.translate_ranked(source, target_cuisine)
    return TranslationResponse(
        result=result,
        alternatives=ranked[1: 1 + max(0, alternatives)],
        resolved_from=source.source,
    )
