"""
Presentation scaling only. Output is for bar widths and shared-trait tests, never for similarity math.
"""
from flavor_engine.flavor.vector import FlavorVector

NORMALIZED_MAX = 100.0


def normalize(vector: FlavorVector) -> FlavorVector:
    """
    Rescale a raw vector onto [0, 100] against its own largest component.
    Zero vector -> zero vector.
    """
    peak = vector.max_component
    if peak <= 0:
        return FlavorVector.zero()
    return FlavorVector(tuple(min(NORMALIZED_MAX, v / peak * NORMALIZED_MAX) for v in vector.values))
