"""
Typed failures for the flavor matching engine.
Every translation failure carries a user-facing message and a stable code for the API layer.
"""


class FlavorDataError(ValueError):
    """Raised when lexicon, universe, or vector data violates the flavor space contract."""


class TranslationError(Exception):
    """Base class for failures reported by FlavorMatcher.translate()."""

    code = "translation_failed"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class SourceNotFound(TranslationError):
    """Source dish could not be resolved locally or through the remote lookup."""

    code = "source_not_found"

    def __init__(self, query: str):
        super().__init__("Source dish not found.")
        self.query = query


class NoCandidates(TranslationError):
    """Target cuisine has no eligible dishes in the universe. Not retryable."""

    code = "no_candidates"

    def __init__(self, cuisine: str):
        super().__init__(f"No flavor data available for {cuisine} cuisine yet.")
        self.cuisine = cuisine
