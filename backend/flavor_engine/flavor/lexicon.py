"""
Flavor lexicon. Loads from data/flavor_lexicon.json.
Maps ingredient-name fragments to partial flavor vectors; lookup is case-insensitive substring containment.
An ingredient may match several fragments; callers sum every match (no "best match wins").
"""
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional
import json
import logging

from flavor_engine.config import get_lexicon_path
from flavor_engine.errors import FlavorDataError
from flavor_engine.flavor.vector import FlavorVector

logger = logging.getLogger(__name__)


def _normalize_fragment(text: str) -> str:
    return " ".join((text or "").lower().split())


class FlavorLexicon:
    """
    Read-only fragment -> FlavorVector mapping.
    Entries keep file order so multi-match results are listed deterministically.
    """

    def __init__(
        self,
        lexicon_path: Optional[Path] = None,
        entries: Optional[Mapping[str, Mapping]] = None,
        version: str = "0",
    ):
        self._path = lexicon_path or get_lexicon_path()
        self._version = version
        self._entries: Mapping[str, FlavorVector] = MappingProxyType({})
        if entries is not None:
            self._entries = MappingProxyType(self._build(entries))
        else:
            self._load()

    @classmethod
    def from_dict(cls, entries: Mapping[str, Mapping], version: str = "inline") -> "FlavorLexicon":
        """Build a lexicon from an in-memory mapping (tests, refresh from another store)."""
        return cls(entries=entries, version=version)

    @staticmethod
    def _build(raw: Mapping[str, Mapping]) -> dict[str, FlavorVector]:
        built: dict[str, FlavorVector] = {}
        for fragment, weights in raw.items():
            key = _normalize_fragment(fragment)
            if not key:
                raise FlavorDataError(f"Empty lexicon fragment: {fragment!r}")
            if key in built:
                # Duplicate spellings of the same fragment accumulate
                built[key] = built[key] + FlavorVector.from_mapping(weights)
            else:
                built[key] = FlavorVector.from_mapping(weights)
        return built

    def _load(self) -> None:
        if not self._path.exists():
            logger.warning("Flavor lexicon not found at %s; lexicon empty.", self._path)
            return
        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        self._version = str(data.get("lexicon_version", "0"))
        self._entries = MappingProxyType(self._build(data.get("entries", {})))
        logger.info("LEXICON loaded %d fragments from %s version=%s", len(self._entries), self._path, self._version)

    def matches(self, ingredient: str) -> list[str]:
        """
        Fragments contained in the ingredient name, in lexicon order.
        Only case is folded; the ingredient's whitespace is matched as written.
        """
        name = (ingredient or "").lower()
        if not name.strip():
            return []
        return [frag for frag in self._entries if frag in name]

    def match_vectors(self, ingredient: str) -> list[FlavorVector]:
        return [self._entries[frag] for frag in self.matches(ingredient)]

    def contribution(self, ingredient: str) -> FlavorVector:
        """Sum of every matching fragment's weights; zero vector when nothing matches."""
        return FlavorVector.total(self.match_vectors(ingredient))

    def get(self, fragment: str) -> Optional[FlavorVector]:
        return self._entries.get(_normalize_fragment(fragment))

    def fragments(self) -> list[str]:
        return list(self._entries.keys())

    def get_version(self) -> str:
        return self._version

    def __contains__(self, fragment: object) -> bool:
        return isinstance(fragment, str) and _normalize_fragment(fragment) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
