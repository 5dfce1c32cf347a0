from .matcher import FlavorMatcher
from .state import FlavorEngineState, get_engine_state

__all__ = [
    "FlavorMatcher",
    "FlavorEngineState",
    "get_engine_state",
]
