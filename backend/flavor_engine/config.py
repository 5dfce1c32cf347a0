"""
Feature flags, paths, and centralized configuration.
All resolution relative to the backend directory.
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Repo root: backend/flavor_engine/config.py -> parent=flavor_engine, parent.parent=backend, parent.parent.parent=repo
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_REPO_ROOT = _BACKEND_DIR.parent

# --- Data paths ---
def get_lexicon_path() -> Path:
    override = os.environ.get("FLAVOR_LEXICON_PATH", "").strip()
    if override:
        return Path(override)
    return _REPO_ROOT / "data" / "flavor_lexicon.json"

def get_universe_path() -> Path:
    override = os.environ.get("FLAVOR_UNIVERSE_PATH", "").strip()
    if override:
        return Path(override)
    return _REPO_ROOT / "data" / "flavor_universe.json"

def get_profiles_export_path() -> Path:
    return _REPO_ROOT / "data" / "flavor_profiles.json"

# --- Remote recipe lookup (lazy read from env) ---
def get_recipe_api_url() -> str:
    return os.environ.get("RECIPE_API_URL", "").strip().rstrip("/")

def get_recipe_api_key() -> str:
    return os.environ.get("RECIPE_API_KEY", "").strip()

# --- Feature flags ---
def get_remote_lookup_enabled() -> bool:
    return os.environ.get("REMOTE_LOOKUP_ENABLED", "true").lower() in ("1", "true", "yes")

# Remote lookup timeout default (seconds)
RECIPE_API_TIMEOUT = int(os.environ.get("RECIPE_API_TIMEOUT", "10"))

# --- Startup logging ---
def log_config() -> None:
    logger.info(
        "CONFIG: lexicon=%s universe=%s recipe_api=%s recipe_key=%s remote_lookup=%s recipe_api_timeout=%ds",
        get_lexicon_path().exists(), get_universe_path().exists(),
        bool(get_recipe_api_url()), bool(get_recipe_api_key()),
        get_remote_lookup_enabled(), RECIPE_API_TIMEOUT,
    )
