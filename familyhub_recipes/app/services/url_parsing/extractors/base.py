"""Common interface for recipe extraction strategies."""

from typing import Optional, Protocol

from familyhub_recipes.app.services.url_parsing.models import RecipeRecord


class RecipeExtractor(Protocol):
    """A strategy that turns a page into a recipe record, or declines with ``None``."""

    name: str

    def extract(self, html: str, url: str) -> Optional[RecipeRecord]:
        ...
