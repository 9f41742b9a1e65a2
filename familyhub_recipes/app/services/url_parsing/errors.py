"""Errors raised while importing a recipe from a URL.

Only ``InvalidInputError`` for a missing URL ever reaches the HTTP layer as a
non-200 response. Everything else is caught by the importer and turned into
the fallback recipe record.
"""

from typing import Optional


class RecipeImportError(Exception):
    """Base class for recipe import failures."""


class InvalidInputError(RecipeImportError):
    """The URL is missing or is not an absolute http(s) URL."""


class FetchError(RecipeImportError):
    """The recipe page could not be retrieved."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class FetchTimeoutError(FetchError, TimeoutError):
    """The recipe site did not answer within the configured time budget."""


class ParseError(RecipeImportError):
    """A single embedded JSON-LD block was not valid JSON."""

    def __init__(self, message: str, block_index: int) -> None:
        super().__init__(message)
        self.block_index = block_index


class ExtractionFailure(RecipeImportError):
    """No extraction strategy produced any recipe data."""
