#!/usr/bin/env python3
"""
Check if the remote recipe lookup service is reachable.
Run from backend: python scripts/check_recipe_api.py
Exit 0 if the service resolves a known dish; 1 if it fails or is not configured.
"""
import sys
from pathlib import Path
from typing import Tuple

# Add backend to path when run as script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Short timeout for health check
HEALTH_TIMEOUT = 8
PROBE_DISH = "pasta"


def check_recipe_api(base_url: str) -> Tuple[bool, str]:
    """Return (success, message)."""
    if not (base_url or "").strip():
        return False, "no API URL (set RECIPE_API_URL)"
    from flavor_engine.external_apis.recipe_lookup import fetch_recipe_by_title
    res = fetch_recipe_by_title(PROBE_DISH, base_url=base_url, timeout=HEALTH_TIMEOUT)
    if res.dish is not None:
        return True, f"ok (resolved {res.dish.name!r}, {len(res.dish.ingredients)} ingredients)"
    return False, res.raw_response_summary or "no result"


def main() -> int:
    from flavor_engine.config import get_recipe_api_url, get_remote_lookup_enabled
    print("Checking remote recipe lookup...")
    if not get_remote_lookup_enabled():
        print("  Recipe API: SKIP - disabled (REMOTE_LOOKUP_ENABLED=false)")
        return 1
    ok, msg = check_recipe_api(get_recipe_api_url())
    print(f"  Recipe API: {'OK' if ok else 'FAIL'} - {msg}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
