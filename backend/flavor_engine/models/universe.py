"""
Dish universe. Loads from data/flavor_universe.json.
Immutable, ordered snapshot: declared order drives source lookup and candidate tie-breaks.
"""
from pathlib import Path
from typing import Iterable, Iterator, Optional
import json
import logging

from flavor_engine.config import get_universe_path
from flavor_engine.models.dish import Dish

logger = logging.getLogger(__name__)


class DishUniverse:
    def __init__(
        self,
        universe_path: Optional[Path] = None,
        dishes: Optional[Iterable[Dish]] = None,
        version: str = "0",
    ):
        self._path = universe_path or get_universe_path()
        self._version = version
        self._dishes: tuple[Dish, ...] = ()
        if dishes is not None:
            self._dishes = tuple(dishes)
        else:
            self._load()

    @classmethod
    def from_dishes(cls, dishes: Iterable[Dish], version: str = "inline") -> "DishUniverse":
        return cls(dishes=dishes, version=version)

    def _load(self) -> None:
        if not self._path.exists():
            logger.warning("Dish universe not found at %s; universe empty.", self._path)
            return
        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        self._version = str(data.get("universe_version", "0"))
        self._dishes = tuple(Dish.from_dict(item) for item in data.get("dishes", []))
        logger.info(
            "UNIVERSE loaded %d dishes across %d cuisines from %s version=%s",
            len(self._dishes), len(self.cuisines()), self._path, self._version,
        )

    def find(self, query: str) -> Optional[Dish]:
        """First dish (declared order) whose name contains the query, case-insensitive."""
        q = (query or "").strip().lower()
        if not q:
            return None
        for dish in self._dishes:
            if q in dish.name.lower():
                return dish
        return None

    def by_cuisine(self, cuisine: str) -> list[Dish]:
        """Dishes whose cuisine label equals the argument exactly (case-sensitive), declared order."""
        return [d for d in self._dishes if d.cuisine == cuisine]

    def cuisines(self) -> list[str]:
        """Distinct cuisine labels in first-seen order."""
        return list(dict.fromkeys(d.cuisine for d in self._dishes))

    def get_version(self) -> str:
        return self._version

    def __iter__(self) -> Iterator[Dish]:
        return iter(self._dishes)

    def __len__(self) -> int:
        return len(self._dishes)
