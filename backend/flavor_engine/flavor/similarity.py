"""
Cosine similarity between raw flavor vectors, plus ranked shared dimensions.
Weights are non-negative, so similarity is in [0, 1]; a zero-magnitude side scores 0.0.
"""
import math
from dataclasses import dataclass, field
from typing import List, Optional

from flavor_engine.flavor.dimensions import FLAVOR_DIMENSIONS, FlavorDimension
from flavor_engine.flavor.normalizer import normalize
from flavor_engine.flavor.vector import FlavorVector


@dataclass(frozen=True)
class SimilarityScore:
    similarity: float
    shared_dimensions: List[FlavorDimension] = field(default_factory=list)

    @property
    def percent(self) -> int:
        return to_percent(self.similarity)


def to_percent(similarity: float) -> int:
    """Similarity in [0, 1] -> integer percentage, halves rounded up."""
    return int(math.floor(similarity * 100 + 0.5))


def _unit_peak(vector: FlavorVector) -> Optional[List[float]]:
    """Components divided by the largest one, so products stay in [0, 1]; None for the zero vector."""
    peak = vector.max_component
    if peak <= 0:
        return None
    return [v / peak for v in vector.values]


def cosine_similarity(a: FlavorVector, b: FlavorVector) -> float:
    # cosine is scale-invariant; rescaling keeps dot products finite for any finite raw weights
    ua = _unit_peak(a)
    ub = _unit_peak(b)
    if ua is None or ub is None:
        return 0.0
    aa = math.fsum(x * x for x in ua)
    bb = math.fsum(y * y for y in ub)
    # single sqrt of the product keeps score(v, v) at exactly 1.0
    sim = math.fsum(x * y for x, y in zip(ua, ub)) / math.sqrt(aa * bb)
    if math.isnan(sim):
        return 0.0
    return max(0.0, min(1.0, sim))


def shared_dimensions(
    a: FlavorVector,
    b: FlavorVector,
    a_normalized: Optional[FlavorVector] = None,
    b_normalized: Optional[FlavorVector] = None,
) -> List[FlavorDimension]:
    """
    Dimensions where both normalized components are > 0,
    ordered by descending raw sum; ties keep declaration order (sort is stable).
    """
    na = a_normalized if a_normalized is not None else normalize(a)
    nb = b_normalized if b_normalized is not None else normalize(b)
    shared = [dim for dim in FLAVOR_DIMENSIONS if na[dim] > 0 and nb[dim] > 0]
    shared.sort(key=lambda dim: a[dim] + b[dim], reverse=True)
    return shared


def score(
    a: FlavorVector,
    b: FlavorVector,
    a_normalized: Optional[FlavorVector] = None,
    b_normalized: Optional[FlavorVector] = None,
) -> SimilarityScore:
    """Score raw vector a against raw vector b. Pre-computed normalized forms may be passed in."""
    return SimilarityScore(
        similarity=cosine_similarity(a, b),
        shared_dimensions=shared_dimensions(a, b, a_normalized, b_normalized),
    )
