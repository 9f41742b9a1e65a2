"""Recipe extractors for different parsing strategies."""

from familyhub_recipes.app.services.url_parsing.extractors.base import RecipeExtractor
from familyhub_recipes.app.services.url_parsing.extractors.generic import (
    GenericHtmlExtractor,
    extract_recipe_from_html,
)
from familyhub_recipes.app.services.url_parsing.extractors.schema_org import (
    StructuredDataExtractor,
    extract_recipe_from_schema_org,
)
from familyhub_recipes.app.services.url_parsing.extractors.site_specific import (
    SITE_SELECTORS,
    SiteSelectors,
    SiteSpecificExtractor,
)

__all__ = [
    "RecipeExtractor",
    "GenericHtmlExtractor",
    "SITE_SELECTORS",
    "SiteSelectors",
    "SiteSpecificExtractor",
    "StructuredDataExtractor",
    "extract_recipe_from_html",
    "extract_recipe_from_schema_org",
]
