"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup

from familyhub_recipes.app.services.url_parsing.errors import ParseError
from familyhub_recipes.app.services.url_parsing.extractors.site_specific import SiteSpecificExtractor
from familyhub_recipes.app.services.url_parsing.models import RecipeRecord, RecipeSource
from familyhub_recipes.app.services.url_parsing.parsing_utils import (
    clean_text,
    decode_entities,
    format_duration,
    ingredient_texts,
    instruction_texts,
    join_ingredients,
    number_instructions,
    resolve_author,
    yield_text,
)

logger = logging.getLogger(__name__)


def _type_names(obj: dict) -> List[str]:
    obj_type = obj.get("@type")
    if not obj_type:
        return []
    types = [obj_type] if isinstance(obj_type, str) else obj_type
    if not isinstance(types, list):
        return []
    return [str(t) for t in types]


def is_recipe_object(obj) -> bool:
    if not isinstance(obj, dict):
        return False
    return any(t.lower() == "recipe" for t in _type_names(obj))


def load_json_ld(raw_json: str, block_index: int):
    try:
        return json.loads(raw_json)
    except json.JSONDecodeError as exc:
        raise ParseError(str(exc), block_index=block_index) from exc


def iter_json_ld_blocks(soup: BeautifulSoup) -> Iterator[object]:
    """Yield the decoded payload of each JSON-LD block, skipping malformed ones."""
    scripts = soup.find_all("script", attrs={"type": "application/ld+json"})
    logger.info("Found %d JSON-LD script blocks", len(scripts))

    for idx, script in enumerate(scripts):
        raw_json = (script.string or script.get_text() or "").strip()
        if not raw_json:
            logger.debug("JSON-LD block %d is empty", idx)
            continue
        try:
            data = load_json_ld(raw_json, idx)
        except ParseError as exc:
            logger.warning(
                "JSON-LD block %d failed to parse: %s (first 200 chars: %s)",
                exc.block_index,
                exc,
                raw_json[:200],
            )
            continue
        yield data


def iter_candidates(data) -> Iterator[dict]:
    """Flatten a JSON-LD payload (object, array or ``@graph``) into objects."""
    if isinstance(data, list):
        for item in data:
            yield from iter_candidates(item)
    elif isinstance(data, dict):
        yield data
        graph = data.get("@graph")
        if isinstance(graph, list):
            for item in graph:
                yield from iter_candidates(item)


def find_recipe_object(soup: BeautifulSoup) -> Optional[dict]:
    """First schema.org ``Recipe`` object in document order."""
    for data in iter_json_ld_blocks(soup):
        for obj in iter_candidates(data):
            if is_recipe_object(obj):
                logger.info("Using JSON-LD object of @type %s", ", ".join(_type_names(obj)))
                return obj
    return None


def record_from_schema(obj: dict, site_name: str) -> RecipeRecord:
    """Map a schema.org ``Recipe`` object onto a ``RecipeRecord``."""
    servings = obj.get("recipeYield")
    if servings in (None, "", []):
        servings = obj.get("yield")
    return RecipeRecord(
        name=clean_text(decode_entities(str(obj.get("name") or ""))),
        description=clean_text(decode_entities(str(obj.get("description") or ""))),
        ingredients=join_ingredients(
            (decode_entities(line) for line in ingredient_texts(obj.get("recipeIngredient"))),
            drop_headings=False,
        ),
        instructions=number_instructions(
            instruction_texts(obj.get("recipeInstructions")), drop_headings=False
        ),
        cook_time=format_duration(obj.get("cookTime") or obj.get("totalTime")),
        servings=yield_text(servings),
        author=resolve_author(obj.get("author")),
        site_name=site_name,
        source=RecipeSource.STRUCTURED_DATA,
    )


class StructuredDataExtractor:
    """Reads the embedded JSON-LD ``Recipe`` most recipe sites publish."""

    name = "structured-data"

    def __init__(
        self, site_name: str = "", site_specific: Optional[SiteSpecificExtractor] = None
    ) -> None:
        self.site_name = site_name
        self.site_specific = site_specific

    def extract(self, html: str, url: str) -> Optional[RecipeRecord]:
        soup = BeautifulSoup(html, "lxml")
        obj = find_recipe_object(soup)
        if obj is None:
            logger.info("No JSON-LD Recipe found")
            return None
        record = record_from_schema(obj, self.site_name)
        if self.site_specific is not None:
            record = self.site_specific.backfill(record, soup)
        logger.info(
            "Structured data recipe: name=%s, ingredients=%d chars, instructions=%d chars",
            record.name[:50] or "None",
            len(record.ingredients),
            len(record.instructions),
        )
        return record


def extract_recipe_from_schema_org(html: str, url: str, site_name: str = "") -> Optional[RecipeRecord]:
    """Extract recipe from schema.org JSON-LD data embedded in HTML."""
    return StructuredDataExtractor(site_name).extract(html, url)
