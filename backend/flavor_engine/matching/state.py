"""
Process-wide handle on the current matcher snapshot.
Reload builds a complete new lexicon + universe + matcher, then swaps the reference in one assignment.
"""
import logging
import threading
from pathlib import Path
from typing import Optional

from flavor_engine.flavor.lexicon import FlavorLexicon
from flavor_engine.matching.matcher import FlavorMatcher
from flavor_engine.models.universe import DishUniverse

logger = logging.getLogger(__name__)


class FlavorEngineState:
    def __init__(self, lexicon_path: Optional[Path] = None, universe_path: Optional[Path] = None):
        self._lexicon_path = lexicon_path
        self._universe_path = universe_path
        self._lock = threading.Lock()
        self._matcher: Optional[FlavorMatcher] = None

    def _build(self) -> FlavorMatcher:
        return FlavorMatcher(
            lexicon=FlavorLexicon(lexicon_path=self._lexicon_path),
            universe=DishUniverse(universe_path=self._universe_path),
        )

    @property
    def matcher(self) -> FlavorMatcher:
        current = self._matcher
        if current is None:
            with self._lock:
                if self._matcher is None:
                    self._matcher = self._build()
                current = self._matcher
        return current

    def reload(self) -> FlavorMatcher:
        """Rebuild from disk. In-flight calls keep the snapshot they already hold."""
        fresh = self._build()
        with self._lock:
            self._matcher = fresh
        logger.info(
            "ENGINE reloaded lexicon_version=%s fragments=%d universe_version=%s dishes=%d",
            fresh.lexicon.get_version(), len(fresh.lexicon),
            fresh.universe.get_version(), len(fresh.universe),
        )
        return fresh


_default_state: Optional[FlavorEngineState] = None


def get_engine_state() -> FlavorEngineState:
    global _default_state
    if _default_state is None:
        _default_state = FlavorEngineState()
    return _default_state
