"""
Export raw + normalized flavor vectors for every universe dish to data/flavor_profiles.json.
Run from repo root: python backend/scripts/export_flavor_profiles.py [output_path]
"""
import json
import logging
import sys
from pathlib import Path
from typing import Optional

# Add backend to path so flavor_engine resolves
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from flavor_engine.config import get_profiles_export_path
from flavor_engine.matching.matcher import FlavorMatcher

logger = logging.getLogger(__name__)


def build_profiles(matcher: FlavorMatcher) -> dict:
    dishes = []
    for dish in matcher.universe:
        profile = matcher.profile(dish.ingredients)
        dishes.append({
            "name": dish.name,
            "cuisine": dish.cuisine,
            **profile.to_dict(),
        })
    return {
        "lexicon_version": matcher.lexicon.get_version(),
        "universe_version": matcher.universe.get_version(),
        "dishes": dishes,
    }


def export(out_path: Optional[Path] = None, matcher: Optional[FlavorMatcher] = None) -> Path:
    out = out_path or get_profiles_export_path()
    data = build_profiles(matcher or FlavorMatcher())
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    unmatched = sum(1 for d in data["dishes"] if d["unmatched_ingredients"])
    logger.info("EXPORT wrote %d dish profiles to %s (%d with unmatched ingredients)", len(data["dishes"]), out, unmatched)
    return out


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print(f"Wrote {export(target)}")
