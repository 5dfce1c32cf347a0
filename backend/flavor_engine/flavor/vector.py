"""
Immutable flavor vector over the fixed dimension set.
Always complete: every dimension carries a non-negative value, missing ones are 0.0.
"""
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional

from flavor_engine.errors import FlavorDataError
from flavor_engine.flavor.dimensions import (
    DIMENSION_COUNT,
    FLAVOR_DIMENSIONS,
    FlavorDimension,
    parse_dimension,
)


@dataclass(frozen=True)
class FlavorVector:
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.values) != DIMENSION_COUNT:
            raise FlavorDataError(
                f"FlavorVector needs {DIMENSION_COUNT} components, got {len(self.values)}"
            )
        for dim, v in zip(FLAVOR_DIMENSIONS, self.values):
            if not math.isfinite(v) or v < 0:
                raise FlavorDataError(f"Invalid weight {v!r} for dimension {dim.value}")

    @classmethod
    def zero(cls) -> "FlavorVector":
        return _ZERO

    @classmethod
    def from_mapping(cls, weights: Optional[Mapping]) -> "FlavorVector":
        """
        Build a vector from {dimension name or FlavorDimension: weight}.
        Unknown dimension names are rejected; absent dimensions default to 0.
        """
        acc = [0.0] * DIMENSION_COUNT
        for name, weight in (weights or {}).items():
            dim = parse_dimension(name)
            if dim is None:
                raise FlavorDataError(f"Unknown flavor dimension: {name!r}")
            try:
                acc[dim.index] += float(weight)
            except (TypeError, ValueError):
                raise FlavorDataError(f"Non-numeric weight {weight!r} for dimension {dim.value}")
        return cls(tuple(acc))

    @classmethod
    def total(cls, vectors: Iterable["FlavorVector"]) -> "FlavorVector":
        """
        Component-wise sum, exactly rounded per dimension (math.fsum),
        so the result does not depend on the order of vectors.
        """
        columns: list[list[float]] = [[] for _ in range(DIMENSION_COUNT)]
        for vec in vectors:
            for i, v in enumerate(vec.values):
                if v:
                    columns[i].append(v)
        try:
            return cls(tuple(math.fsum(col) for col in columns))
        except OverflowError:
            raise FlavorDataError("Flavor weight sum exceeds the float range")

    def __getitem__(self, dim: FlavorDimension) -> float:
        return self.values[dim.index]

    def __iter__(self) -> Iterator[tuple[FlavorDimension, float]]:
        return iter(zip(FLAVOR_DIMENSIONS, self.values))

    def __add__(self, other: "FlavorVector") -> "FlavorVector":
        if not isinstance(other, FlavorVector):
            return NotImplemented
        return FlavorVector.total((self, other))

    @property
    def magnitude(self) -> float:
        return math.hypot(*self.values)

    @property
    def max_component(self) -> float:
        return max(self.values)

    def is_zero(self) -> bool:
        return not any(self.values)

    def dot(self, other: "FlavorVector") -> float:
        return sum(a * b for a, b in zip(self.values, other.values))

    def to_dict(self, ndigits: Optional[int] = None) -> dict[str, float]:
        if ndigits is None:
            return {dim.value: v for dim, v in self}
        return {dim.value: round(v, ndigits) for dim, v in self}

    @classmethod
    def from_dict(cls, d: dict) -> "FlavorVector":
        return cls.from_mapping(d)


_ZERO = FlavorVector((0.0,) * DIMENSION_COUNT)
