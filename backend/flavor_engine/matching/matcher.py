"""
Deterministic flavor matcher. Single pipeline for every translation request.
Resolve source (local universe only) -> filter candidates by cuisine -> score -> pick best -> assemble result.
No network access here; remote resolution happens before translate() is called (see flavor_engine.bridge).
"""
from typing import Dict, Iterable, List, Optional, Tuple, Union
import logging

from flavor_engine.errors import NoCandidates, SourceNotFound
from flavor_engine.flavor.lexicon import FlavorLexicon
from flavor_engine.flavor.normalizer import normalize
from flavor_engine.flavor.similarity import score, to_percent
from flavor_engine.flavor.vector import FlavorVector
from flavor_engine.flavor.vectorizer import split_matched, vectorize
from flavor_engine.models.dish import Dish
from flavor_engine.models.translation import FlavorProfile, ScoredCandidate, TranslationResult
from flavor_engine.models.universe import DishUniverse

logger = logging.getLogger(__name__)


class _DishVectors:
    """Raw/normalized vector memo for one matcher call. Keyed by the (frozen) dish value."""

    def __init__(self, lexicon: FlavorLexicon):
        self._lexicon = lexicon
        self._raw: Dict[Dish, FlavorVector] = {}
        self._normalized: Dict[Dish, FlavorVector] = {}

    def raw(self, dish: Dish) -> FlavorVector:
        vec = self._raw.get(dish)
        if vec is None:
            vec = vectorize(dish.ingredients, self._lexicon)
            self._raw[dish] = vec
        return vec

    def normalized(self, dish: Dish) -> FlavorVector:
        vec = self._normalized.get(dish)
        if vec is None:
            vec = normalize(self.raw(dish))
            self._normalized[dish] = vec
        return vec


class FlavorMatcher:
    """
    Pipeline: resolve -> candidates -> score -> select.
    Holds only the immutable lexicon and universe; safe to share across threads.
    """

    def __init__(
        self,
        lexicon: Optional[FlavorLexicon] = None,
        universe: Optional[DishUniverse] = None,
    ):
        self._lexicon = lexicon if lexicon is not None else FlavorLexicon()
        self._universe = universe if universe is not None else DishUniverse()

    @property
    def lexicon(self) -> FlavorLexicon:
        return self._lexicon

    @property
    def universe(self) -> DishUniverse:
        return self._universe

    def resolve_source(self, source: Union[Dish, str]) -> Dish:
        """
        A Dish is used as-is; a string is matched against the universe by case-insensitive substring.
        Raises SourceNotFound when the universe has no match.
        """
        if isinstance(source, Dish):
            return source
        dish = self._universe.find(source)
        if dish is None:
            logger.info("TRANSLATE source_not_found query=%s", (source or "")[:60])
            raise SourceNotFound(source or "")
        return dish

    def candidates(self, source: Dish, target_cuisine: str) -> List[Dish]:
        """Universe dishes with cuisine == target_cuisine (exact), minus the source by name."""
        return [
            d for d in self._universe.by_cuisine(target_cuisine)
            if not d.matches_name(source.name)
        ]

    def _score_all(self, source_dish: Dish, target_cuisine: str) -> Tuple[FlavorVector, List[ScoredCandidate]]:
        """(source normalized vector, candidates best first). Ties keep universe order (stable sort)."""
        pool = self.candidates(source_dish, target_cuisine)
        if not pool:
            logger.info(
                "TRANSLATE no_candidates source=%s target=%s universe_size=%d",
                source_dish.name, target_cuisine, len(self._universe),
            )
            raise NoCandidates(target_cuisine)

        vectors = _DishVectors(self._lexicon)
        source_raw = vectors.raw(source_dish)
        source_norm = vectors.normalized(source_dish)
        if source_raw.is_zero():
            logger.info(
                "TRANSLATE degenerate_source name=%s ingredients=%d (no lexicon match, similarity=0)",
                source_dish.name, len(source_dish.ingredients),
            )

        scored: List[ScoredCandidate] = []
        for cand in pool:
            result = score(source_raw, vectors.raw(cand), source_norm, vectors.normalized(cand))
            scored.append(
                ScoredCandidate(
                    dish=cand,
                    similarity=result.similarity,
                    shared_dimensions=result.shared_dimensions,
                    vector=vectors.normalized(cand),
                )
            )

        scored.sort(key=lambda c: c.similarity, reverse=True)
        logger.info(
            "TRANSLATE scored source=%s target=%s candidates=%d best=%s similarity=%.4f",
            source_dish.name, target_cuisine, len(scored), scored[0].dish.name, scored[0].similarity,
        )
        return source_norm, scored

    def rank(
        self,
        source: Union[Dish, str],
        target_cuisine: str,
        limit: Optional[int] = None,
    ) -> List[ScoredCandidate]:
        """Every eligible candidate, best first. Raises SourceNotFound / NoCandidates."""
        _, scored = self._score_all(self.resolve_source(source), target_cuisine)
        if limit is not None:
            return scored[: max(0, limit)]
        return scored

    def translate(self, source: Union[Dish, str], target_cuisine: str) -> TranslationResult:
        """
        Best match for source in target_cuisine.
        Raises SourceNotFound or NoCandidates; never returns a partial result.
        """
        result, _ = self.translate_ranked(source, target_cuisine)
        return result

    def translate_ranked(
        self, source: Union[Dish, str], target_cuisine: str
    ) -> Tuple[TranslationResult, List[ScoredCandidate]]:
        """translate() plus the full candidate ranking it was picked from."""
        source_dish = self.resolve_source(source)
        source_norm, scored = self._score_all(source_dish, target_cuisine)
        best = scored[0]
        result = TranslationResult(
            source=source_dish,
            target=best.dish,
            similarity=to_percent(best.similarity),
            shared_dimensions=list(best.shared_dimensions),
            source_vector=source_norm,
            target_vector=best.vector,
        )
        return result, scored

    def profile(self, ingredients: Iterable[str]) -> FlavorProfile:
        """Raw and normalized vectors for an ingredient list, plus which ingredients hit the lexicon."""
        items = [i for i in (ingredients or []) if i and str(i).strip()]
        raw = vectorize(items, self._lexicon)
        matched, unmatched = split_matched(items, self._lexicon)
        return FlavorProfile(raw=raw, normalized=normalize(raw), matched=matched, unmatched=unmatched)
