"""
Remote recipe lookup: resolve a free-text dish name to a Dish when it is not in the local universe.
Search by title (first result only), then fetch the detail record by id.
Response shapes vary between API versions, so field extraction is tolerant.
In-memory cache with TTL, keyed by query hash.
"""
import hashlib
import logging
import time
from typing import Any, Optional

import requests

from flavor_engine.config import (
    RECIPE_API_TIMEOUT,
    get_recipe_api_key,
    get_recipe_api_url,
)
from flavor_engine.external_apis.base import RecipeLookupResult
from flavor_engine.external_apis.http_retry import get_with_retries
from flavor_engine.models.dish import DEFAULT_CUISINE, Dish

logger = logging.getLogger(__name__)

SEARCH_PATH = "/recipe/search"
DETAIL_PATH = "/recipe/{recipe_id}"
SOURCE_NAME = "recipe_api"

# In-memory cache: hash -> (RecipeLookupResult, timestamp)
_lookup_cache: dict[str, tuple[RecipeLookupResult, float]] = {}
_CACHE_MAX_ENTRIES = 500
_CACHE_TTL_SECONDS = 3600  # 1 hour


def _cache_key(query: str) -> str:
    return hashlib.sha256(query.encode()).hexdigest()[:32]


def _evict_expired() -> None:
    """Remove expired entries when cache is full."""
    if len(_lookup_cache) < _CACHE_MAX_ENTRIES:
        return
    now = time.time()
    expired = [k for k, (_, ts) in _lookup_cache.items() if now - ts > _CACHE_TTL_SECONDS]
    for k in expired:
        del _lookup_cache[k]


def _headers(api_key: str) -> dict:
    return {"Authorization": f"Bearer {api_key}"} if api_key else {}


def _first_search_hit(data: Any) -> Optional[dict]:
    """payload.data[0], data[0], or a bare list's first item."""
    if isinstance(data, list):
        return data[0] if data and isinstance(data[0], dict) else None
    if not isinstance(data, dict):
        return None
    payload = data.get("payload")
    for container in (payload.get("data") if isinstance(payload, dict) else None, data.get("data")):
        if isinstance(container, list) and container and isinstance(container[0], dict):
            return container[0]
    return None


def _recipe_id(hit: dict) -> Optional[str]:
    rid = hit.get("recipe_id") or hit.get("Recipe_id")
    return str(rid) if rid not in (None, "") else None


def _detail_record(detail: Any, hit: dict) -> dict:
    """recipe / payload.data / data, falling back to the search hit."""
    if not isinstance(detail, dict):
        return hit
    payload = detail.get("payload")
    for candidate in (
        detail.get("recipe"),
        payload.get("data") if isinstance(payload, dict) else None,
        detail.get("data"),
    ):
        if isinstance(candidate, list) and candidate and isinstance(candidate[0], dict):
            return candidate[0]
        if isinstance(candidate, dict) and candidate:
            return candidate
    return hit


def _to_dish(hit: dict, detail: Any) -> Optional[Dish]:
    record = _detail_record(detail, hit)
    ingredients = (detail.get("ingredients") if isinstance(detail, dict) else None) or record.get("ingredients") or []
    name = record.get("recipe_title") or record.get("name") or hit.get("recipe_title") or hit.get("name")
    if not name:
        return None
    return Dish.build(
        name=name,
        cuisine=record.get("cuisine") or record.get("region") or DEFAULT_CUISINE,
        ingredients=ingredients if isinstance(ingredients, list) else [],
        image=record.get("img_url") or record.get("image_url") or hit.get("img_url"),
        source=SOURCE_NAME,
    )


def fetch_recipe_by_title(
    query: str,
    base_url: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout: int = RECIPE_API_TIMEOUT,
) -> RecipeLookupResult:
    """
    Search the recipe service for query and build a Dish from the first hit's detail record.
    Never raises for network or payload problems; returns dish=None with a summary instead.
    """
    if not query or not query.strip():
        return RecipeLookupResult(None, "none", "empty_query")
    base = (base_url if base_url is not None else get_recipe_api_url()).rstrip("/")
    if not base:
        return RecipeLookupResult(None, "none", "no_api_url")
    key = api_key if api_key is not None else get_recipe_api_key()
    q = query.strip()[:200]

    resp, err = get_with_retries(
        base + SEARCH_PATH,
        params={"title": q, "page": 1, "limit": 1},
        headers=_headers(key),
        timeout=timeout,
    )
    if err is not None:
        logger.warning("RECIPE_LOOKUP search failed after retries query=%s error=%s", q, err)
        return RecipeLookupResult(None, SOURCE_NAME, f"error:{err[:80]}")
    try:
        resp.raise_for_status()
        hit = _first_search_hit(resp.json())
    except (requests.RequestException, ValueError) as e:
        logger.warning("RECIPE_LOOKUP search response error query=%s error=%s", q, e)
        return RecipeLookupResult(None, SOURCE_NAME, f"error:{type(e).__name__}")
    if hit is None:
        logger.info("RECIPE_LOOKUP no results query=%s", q)
        return RecipeLookupResult(None, SOURCE_NAME, "no_results")

    detail: Any = None
    rid = _recipe_id(hit)
    if rid is not None:
        dresp, derr = get_with_retries(
            base + DETAIL_PATH.format(recipe_id=rid),
            headers=_headers(key),
            timeout=timeout,
        )
        if derr is not None:
            logger.warning("RECIPE_LOOKUP detail failed recipe_id=%s error=%s; using search hit", rid, derr)
        else:
            try:
                dresp.raise_for_status()
                detail = dresp.json()
            except (requests.RequestException, ValueError) as e:
                logger.warning("RECIPE_LOOKUP detail response error recipe_id=%s error=%s; using search hit", rid, e)

    dish = _to_dish(hit, detail)
    if dish is None:
        logger.info("RECIPE_LOOKUP unusable record query=%s recipe_id=%s", q, rid)
        return RecipeLookupResult(None, SOURCE_NAME, "no_title")
    logger.info(
        "RECIPE_LOOKUP resolved query=%s name=%s cuisine=%s ingredients=%d",
        q, dish.name[:60], dish.cuisine, len(dish.ingredients),
    )
    return RecipeLookupResult(dish, SOURCE_NAME, f"recipe_id={rid}")


def lookup_dish(query: str, use_cache: bool = True) -> RecipeLookupResult:
    """Cached entry point for source resolution."""
    normalized = " ".join((query or "").lower().split())
    key = _cache_key(normalized)

    if use_cache and key in _lookup_cache:
        cached, ts = _lookup_cache[key]
        if time.time() - ts < _CACHE_TTL_SECONDS:
            logger.debug("RECIPE_LOOKUP cache hit query=%s", normalized[:50])
            return cached
        del _lookup_cache[key]

    result = fetch_recipe_by_title(query)

    # Transport failures are not cached so the next request retries
    if use_cache and not result.raw_response_summary.startswith("error:"):
        _evict_expired()
        if len(_lookup_cache) < _CACHE_MAX_ENTRIES:
            _lookup_cache[key] = (result, time.time())
    return result


def clear_lookup_cache() -> None:
    """Clear in-memory lookup cache (e.g. for tests)."""
    global _lookup_cache
    _lookup_cache = {}
