"""
Ingredient list -> raw flavor vector. Pure sum of lexicon contributions, so ingredient order never matters.
"""
import logging
from typing import Iterable, List, Tuple

from flavor_engine.flavor.lexicon import FlavorLexicon
from flavor_engine.flavor.vector import FlavorVector

logger = logging.getLogger(__name__)


def vectorize(ingredients: Iterable[str], lexicon: FlavorLexicon) -> FlavorVector:
    """
    Raw (unnormalized) flavor vector for an ingredient list.
    Every matching fragment of every ingredient is summed in one exactly rounded pass.
    Unmatched ingredients and empty lists contribute the zero vector.
    """
    terms: List[FlavorVector] = []
    for ingredient in ingredients or []:
        hits = lexicon.match_vectors(ingredient)
        if not hits:
            logger.debug("UNMATCHED_INGREDIENT raw=%s", (ingredient or "")[:60])
            continue
        terms.extend(hits)
    return FlavorVector.total(terms)


def split_matched(ingredients: Iterable[str], lexicon: FlavorLexicon) -> Tuple[List[str], List[str]]:
    """Partition ingredients into (matched, unmatched) against the lexicon, preserving order."""
    matched: List[str] = []
    unmatched: List[str] = []
    for ingredient in ingredients or []:
        if lexicon.matches(ingredient):
            matched.append(ingredient)
        else:
            unmatched.append(ingredient)
    return matched, unmatched
