"""URL recipe import package.

This package provides functionality for extracting recipes from URLs using
multiple strategies: schema.org JSON-LD, per-site selectors and generic HTML
markup, with a manual-entry fallback record when nothing can be extracted.
"""

from familyhub_recipes.app.services.url_parsing.errors import (
    ExtractionFailure,
    FetchError,
    FetchTimeoutError,
    InvalidInputError,
    ParseError,
    RecipeImportError,
)
from familyhub_recipes.app.services.url_parsing.html_fetcher import (
    fetch_html,
    validate_url,
)
from familyhub_recipes.app.services.url_parsing.models import (
    RecipeRecord,
    RecipeSource,
)
from familyhub_recipes.app.services.url_parsing.parsing_utils import (
    clean_text,
    decode_entities,
    extract_servings_number,
    format_duration,
    get_site_name,
    join_ingredients,
    number_instructions,
    resolve_author,
)

__all__ = [
    # Errors
    "ExtractionFailure",
    "FetchError",
    "FetchTimeoutError",
    "InvalidInputError",
    "ParseError",
    "RecipeImportError",
    # Models
    "RecipeRecord",
    "RecipeSource",
    # HTML fetching
    "fetch_html",
    "validate_url",
    # Parsing utilities
    "clean_text",
    "decode_entities",
    "extract_servings_number",
    "format_duration",
    "get_site_name",
    "join_ingredients",
    "number_instructions",
    "resolve_author",
]
