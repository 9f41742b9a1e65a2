"""Recipe import pipeline.

Fetches a recipe page, runs the extraction strategies in order and always
answers with a usable ``RecipeRecord``. Any failure after input validation
degrades to the manual-entry fallback record instead of an error.
"""

import logging
from typing import Optional, Sequence

from familyhub_recipes.app.schemas.recipe_import import RecipeImportResponse
from familyhub_recipes.app.services.url_parsing.errors import (
    ExtractionFailure,
    RecipeImportError,
)
from familyhub_recipes.app.services.url_parsing.extractors import (
    GenericHtmlExtractor,
    RecipeExtractor,
    SiteSpecificExtractor,
    StructuredDataExtractor,
)
from familyhub_recipes.app.services.url_parsing.html_fetcher import fetch_html
from familyhub_recipes.app.services.url_parsing.models import RecipeRecord, RecipeSource
from familyhub_recipes.app.services.url_parsing.parsing_utils import get_host, get_site_name

logger = logging.getLogger(__name__)

FALLBACK_INGREDIENTS = "Please add ingredients manually"
FALLBACK_INSTRUCTIONS = (
    "Please add cooking instructions manually. Full recipe available at the linked URL."
)
FALLBACK_MESSAGE = "Could not parse recipe automatically. Please add details manually."


def default_extractors(url: str, site_name: str) -> list[RecipeExtractor]:
    """Strategies in the order they are tried: structured data, then markup."""
    site_specific = SiteSpecificExtractor(get_host(url))
    return [
        StructuredDataExtractor(site_name, site_specific),
        GenericHtmlExtractor(site_name, site_specific),
    ]


def extract_recipe(
    html: str,
    url: str,
    site_name: Optional[str] = None,
    extractors: Optional[Sequence[RecipeExtractor]] = None,
) -> RecipeRecord:
    """Run the extractors until one returns a record.

    Raises ``ExtractionFailure`` when none of them finds anything.
    """
    if site_name is None:
        site_name = get_site_name(url)
    if extractors is None:
        extractors = default_extractors(url, site_name)

    for extractor in extractors:
        record = extractor.extract(html, url)
        if record is not None:
            logger.info("Recipe extracted via %s strategy", extractor.name)
            if not record.name:
                record = record.model_copy(update={"name": f"Recipe from {site_name}"})
            return record
    raise ExtractionFailure("No extraction strategy produced recipe data")


def fallback_record(site_name: str) -> RecipeRecord:
    return RecipeRecord(
        name=f"Recipe from {site_name}",
        description=f"Recipe imported from {site_name}",
        ingredients=FALLBACK_INGREDIENTS,
        instructions=FALLBACK_INSTRUCTIONS,
        site_name=site_name,
        source=RecipeSource.FALLBACK,
    )


def build_success_response(record: RecipeRecord, html_length: int) -> RecipeImportResponse:
    return RecipeImportResponse(
        success=True,
        recipe=record,
        source=record.source,
        debug={
            "siteName": record.site_name,
            "htmlLength": html_length,
            "extractedFields": record.extracted_fields(),
        },
    )


def build_fallback_response(site_name: str, error: str) -> RecipeImportResponse:
    return RecipeImportResponse(
        success=True,
        recipe=fallback_record(site_name),
        source=RecipeSource.FALLBACK,
        message=FALLBACK_MESSAGE,
        debug={"error": error, "siteName": site_name},
    )


async def import_recipe(url: str) -> RecipeImportResponse:
    """Import a recipe from ``url``; never raises for fetch or parse failures."""
    site_name = get_site_name(url)
    logger.info("Parsing recipe from %s (site: %s)", url, site_name)

    try:
        html = await fetch_html(url)
        record = extract_recipe(html, url, site_name)
    except RecipeImportError as exc:
        logger.warning("Recipe import for %s fell back (%s): %s", url, type(exc).__name__, exc)
        return build_fallback_response(site_name, str(exc))
    except Exception as exc:
        logger.exception("Unexpected error importing recipe from %s", url)
        return build_fallback_response(site_name, str(exc))

    logger.info("Parsed recipe %r from %s via %s", record.name, url, record.source)
    return build_success_response(record, len(html))
