"""
Remote recipe service connector used to resolve source dishes missing from the local universe.
"""
from .base import RecipeLookupResult
from .recipe_lookup import fetch_recipe_by_title, lookup_dish, clear_lookup_cache

__all__ = [
    "RecipeLookupResult",
    "fetch_recipe_by_title",
    "lookup_dish",
    "clear_lookup_cache",
]
