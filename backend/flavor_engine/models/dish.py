"""
Dish record shared by the universe, the remote lookup, and translation results.
Frozen and hashable so per-call vector caches can key on the dish itself.
"""
from dataclasses import dataclass, field
from typing import Iterable, Optional

from flavor_engine.errors import FlavorDataError

DEFAULT_CUISINE = "International"


@dataclass(frozen=True)
class Dish:
    name: str
    cuisine: str
    ingredients: tuple[str, ...] = field(default_factory=tuple)
    image: Optional[str] = None
    # "universe" for corpus dishes; remote lookup / "user" otherwise
    source: str = "universe"

    @classmethod
    def build(
        cls,
        name: str,
        cuisine: Optional[str],
        ingredients: Iterable,
        image: Optional[str] = None,
        source: str = "universe",
    ) -> "Dish":
        """Construct from loosely typed input; ingredient items may be strings or {"ingredient": ...} dicts."""
        clean: list[str] = []
        for item in ingredients or []:
            if isinstance(item, dict):
                item = item.get("ingredient") or item.get("name") or ""
            text = str(item).strip()
            if text:
                clean.append(text)
        return cls(
            name=(name or "").strip(),
            cuisine=(cuisine or DEFAULT_CUISINE).strip(),
            ingredients=tuple(clean),
            image=image or None,
            source=source,
        )

    def matches_name(self, other_name: str) -> bool:
        """Case-insensitive name equality."""
        return self.name.lower() == (other_name or "").lower()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "cuisine": self.cuisine,
            "ingredients": list(self.ingredients),
            "image": self.image,
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Dish":
        if not d.get("name"):
            raise FlavorDataError(f"Dish entry without a name: {d!r}")
        if not d.get("cuisine"):
            raise FlavorDataError(f"Dish {d['name']!r} has no cuisine label")
        return cls.build(
            name=d["name"],
            cuisine=d["cuisine"],
            ingredients=d.get("ingredients", []) or [],
            image=d.get("image"),
            source=d.get("source", "universe"),
        )
