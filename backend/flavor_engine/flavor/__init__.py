"""
Flavor space: fixed dimensions, vectors, lexicon, and the pure vector math on top of them.
"""
from .dimensions import FlavorDimension, FLAVOR_DIMENSIONS, parse_dimension
from .vector import FlavorVector
from .lexicon import FlavorLexicon
from .vectorizer import vectorize, split_matched
from .normalizer import normalize
from .similarity import SimilarityScore, cosine_similarity, shared_dimensions, score, to_percent

__all__ = [
    "FlavorDimension",
    "FLAVOR_DIMENSIONS",
    "parse_dimension",
    "FlavorVector",
    "FlavorLexicon",
    "vectorize",
    "split_matched",
    "normalize",
    "SimilarityScore",
    "cosine_similarity",
    "shared_dimensions",
    "score",
    "to_percent",
]
