"""
Unit tests for FlavorMatcher: source resolution, candidate filtering, deterministic selection, typed failures.
Run from repo root: python -m pytest backend/tests/test_matcher.py -v
"""
import pytest


LEXICON = {
    "tomato": {"acidity": 3, "sweetness": 1},
    "basil": {"aromatic": 2},
    "chili": {"spice_heat": 4},
    "lime": {"acidity": 4},
    "fish sauce": {"umami": 5, "saltiness": 4},
    "coconut milk": {"fattiness": 4, "sweetness": 2},
    "soy sauce": {"umami": 4, "saltiness": 4},
}


def _dish(name, cuisine, *ingredients):
    from flavor_engine.models.dish import Dish
    return Dish.build(name=name, cuisine=cuisine, ingredients=list(ingredients))


def _matcher(dishes, lexicon=None):
    from flavor_engine.flavor.lexicon import FlavorLexicon
    from flavor_engine.matching.matcher import FlavorMatcher
    from flavor_engine.models.universe import DishUniverse
    return FlavorMatcher(
        lexicon=FlavorLexicon.from_dict(lexicon or LEXICON),
        universe=DishUniverse.from_dishes(dishes),
    )


def _universe():
    return [
        _dish("Tomato Basil Pasta", "Italian", "tomato", "basil", "pasta"),
        _dish("Som Tam", "Thai", "lime", "fish sauce", "chili", "tomato"),
        _dish("Green Curry", "Thai", "coconut milk", "chili", "fish sauce", "basil"),
        _dish("Pad Thai", "Thai", "fish sauce", "lime", "rice noodle"),
        _dish("Mapo Tofu", "Chinese", "soy sauce", "chili", "tofu"),
    ]


def test_translate_picks_highest_similarity():
    """Best candidate is the one with the strictly highest cosine similarity."""
    from flavor_engine.flavor.dimensions import FlavorDimension
    m = _matcher(_universe())
    result = m.translate("tomato basil", "Thai")
    assert result.source.name == "Tomato Basil Pasta"
    assert result.target.name == "Som Tam"
    assert 0 <= result.similarity <= 100
    assert result.shared_dimensions[0] == FlavorDimension.ACIDITY
    assert all(0.0 <= v <= 100.0 for v in result.target_vector.values)
    assert max(result.source_vector.values) == 100.0


def test_translate_tie_picks_first_in_universe_order():
    """Two Thai dishes with identical similarity: the first declared wins, every run."""
    dishes = [
        _dish("Tomato Salad", "Italian", "tomato"),
        _dish("Thai Tomato One", "Thai", "tomato", "basil"),
        _dish("Thai Tomato Two", "Thai", "basil", "tomato"),
    ]
    m = _matcher(dishes)
    for _ in range(10):
        assert m.translate("Tomato Salad", "Thai").target.name == "Thai Tomato One"

    swapped = _matcher([dishes[0], dishes[2], dishes[1]])
    assert swapped.translate("Tomato Salad", "Thai").target.name == "Thai Tomato Two"


def test_translate_unknown_cuisine_raises_no_candidates():
    """No dish in the target cuisine -> NoCandidates naming the cuisine, no result."""
    from flavor_engine.errors import NoCandidates
    m = _matcher(_universe())
    with pytest.raises(NoCandidates) as exc:
        m.translate("Pad Thai", "Ethiopian")
    assert exc.value.cuisine == "Ethiopian"
    assert "Ethiopian" in exc.value.message
    assert exc.value.code == "no_candidates"


def test_translate_empty_universe_raises():
    """Empty universe with a supplied source dish -> NoCandidates."""
    from flavor_engine.errors import NoCandidates
    m = _matcher([])
    with pytest.raises(NoCandidates):
        m.translate(_dish("Custom", "Italian", "tomato"), "Thai")


def test_cuisine_match_is_case_sensitive():
    """'thai' does not match 'Thai'; callers keep casing consistent."""
    from flavor_engine.errors import NoCandidates
    m = _matcher(_universe())
    with pytest.raises(NoCandidates):
        m.translate("Tomato Basil Pasta", "thai")


def test_source_excluded_from_candidates():
    """The source dish never matches itself, even in its own cuisine (case-insensitive name)."""
    m = _matcher(_universe())
    result = m.translate("som tam", "Thai")
    assert result.source.name == "Som Tam"
    assert result.target.name != "Som Tam"
    names = [c.dish.name for c in m.rank("Som Tam", "Thai")]
    assert "Som Tam" not in names
    assert len(names) == 2


def test_only_source_in_cuisine_raises_no_candidates():
    """If the source is the only dish of the cuisine, there is nothing to translate to."""
    from flavor_engine.errors import NoCandidates
    m = _matcher(_universe())
    with pytest.raises(NoCandidates):
        m.translate("Mapo Tofu", "Chinese")


def test_source_not_found_in_universe():
    """String source with no universe match -> SourceNotFound."""
    from flavor_engine.errors import SourceNotFound
    m = _matcher(_universe())
    with pytest.raises(SourceNotFound) as exc:
        m.translate("Beef Wellington", "Thai")
    assert exc.value.query == "Beef Wellington"
    assert exc.value.to_dict() == {"code": "source_not_found", "message": "Source dish not found."}


def test_source_lookup_first_substring_match():
    """Source lookup is case-insensitive substring, first in declared order."""
    m = _matcher(_universe())
    assert m.resolve_source("CURRY").name == "Green Curry"
    assert m.resolve_source("a").name == "Tomato Basil Pasta"


def test_degenerate_source_scores_zero_and_stays_deterministic():
    """Source with no lexicon hits: every similarity is 0, first candidate wins."""
    m = _matcher(_universe())
    src = _dish("Plain Water", "None", "water", "ice")
    ranked = m.rank(src, "Thai")
    assert [c.similarity for c in ranked] == [0.0, 0.0, 0.0]
    result = m.translate(src, "Thai")
    assert result.target.name == "Som Tam"
    assert result.similarity == 0
    assert result.shared_dimensions == []


def test_rank_orders_descending_with_limit():
    """rank() returns candidates best first; limit trims the list."""
    m = _matcher(_universe())
    ranked = m.rank("Tomato Basil Pasta", "Thai")
    sims = [c.similarity for c in ranked]
    assert sims == sorted(sims, reverse=True)
    assert len(m.rank("Tomato Basil Pasta", "Thai", limit=1)) == 1
    assert m.rank("Tomato Basil Pasta", "Thai", limit=0) == []


def test_translate_ranked_matches_translate():
    """translate_ranked() returns the same winner as translate() and the full ranking."""
    m = _matcher(_universe())
    result, ranked = m.translate_ranked("Tomato Basil Pasta", "Thai")
    assert result == m.translate("Tomato Basil Pasta", "Thai")
    assert ranked[0].dish == result.target
    assert len(ranked) == 3


def test_translation_result_to_dict():
    """Result dict carries both dishes, vectors for every dimension, percent and shared traits."""
    from flavor_engine.flavor.dimensions import FLAVOR_DIMENSIONS
    m = _matcher(_universe())
    d = m.translate("Tomato Basil Pasta", "Thai").to_dict()
    assert d["source"]["name"] == "Tomato Basil Pasta"
    assert d["target"]["cuisine"] == "Thai"
    assert set(d["target"]["vector"]) == {dim.value for dim in FLAVOR_DIMENSIONS}
    assert isinstance(d["similarity"], int)
    assert d["shared_traits"][0] == "acidity"


def test_profile_reports_matched_and_unmatched():
    """profile() returns raw + normalized vectors and the lexicon hit split."""
    m = _matcher(_universe())
    profile = m.profile(["tomato", "water", "", "basil"])
    assert profile.matched == ["tomato", "basil"]
    assert profile.unmatched == ["water"]
    assert profile.raw.to_dict()["acidity"] == 3.0
    assert profile.normalized.to_dict()["acidity"] == 100.0


def test_matcher_on_shipped_data():
    """Shipped universe translates every listed dish into another cuisine without error."""
    from flavor_engine.config import get_lexicon_path, get_universe_path
    from flavor_engine.matching.matcher import FlavorMatcher
    if not (get_lexicon_path().exists() and get_universe_path().exists()):
        pytest.skip("shipped data files not found")
    m = FlavorMatcher()
    for cuisine in m.universe.cuisines():
        result = m.translate("Margherita Pizza", cuisine)
        assert result.target.cuisine == cuisine
        assert result.target.name != "Margherita Pizza"
        assert 0 <= result.similarity <= 100


def test_tie_break_with_fractional_weights_in_reversed_order():
    """Same ingredients listed in reverse order still tie; the first declared dish wins."""
    lexicon = {"alpha": {"acidity": 0.1}, "beta": {"acidity": 0.2}, "gamma": {"acidity": 0.3, "umami": 0.1}}
    dishes = [
        _dish("Src", "Italian", "alpha", "gamma"),
        _dish("One", "Thai", "alpha", "beta", "gamma"),
        _dish("Two", "Thai", "gamma", "beta", "alpha"),
    ]
    m = _matcher(dishes, lexicon=lexicon)
    ranked = m.rank("Src", "Thai")
    assert ranked[0].similarity == ranked[1].similarity
    assert [c.dish.name for c in ranked] == ["One", "Two"]
    assert m.translate("Src", "Thai").target.name == "One"
