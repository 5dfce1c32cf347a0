"""
HTTP GET with retries and exponential backoff for the remote recipe lookup.
"""
import logging
import time
from typing import Optional, Tuple

import requests

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 3
DEFAULT_INITIAL_BACKOFF = 1.0
# Rate limiting and gateway errors from the recipe service are transient
RETRY_STATUS_CODES = frozenset({429, 502, 503, 504})


def get_with_retries(
    url: str,
    params: Optional[dict] = None,
    headers: Optional[dict] = None,
    timeout: int = 10,
    max_retries: int = DEFAULT_MAX_RETRIES,
    initial_backoff: float = DEFAULT_INITIAL_BACKOFF,
) -> Tuple[Optional[requests.Response], Optional[str]]:
    """
    GET with exponential backoff on timeouts, connection errors and RETRY_STATUS_CODES.
    Other HTTP error statuses come back as responses for the caller to inspect.
    Returns (response, None) on success, (None, error_message) on failure.
    """
    last_error: Optional[str] = None
    for attempt in range(max_retries):
        try:
            resp = requests.get(url, params=params or {}, headers=headers or {}, timeout=timeout)
        except requests.Timeout as e:
            last_error = f"Read timed out: {e}"
        except requests.RequestException as e:
            last_error = f"{type(e).__name__}: {e}"
        else:
            if resp.status_code not in RETRY_STATUS_CODES:
                return (resp, None)
            last_error = f"HTTP {resp.status_code}"
        logger.warning(
            "RECIPE_API retry attempt=%s/%s url=%s error=%s",
            attempt + 1, max_retries, url[:80], last_error,
        )
        if attempt < max_retries - 1:
            delay = initial_backoff * (2 ** attempt)
            logger.info("RECIPE_API backoff %.1fs before retry", delay)
            time.sleep(delay)
    return (None, last_error)
