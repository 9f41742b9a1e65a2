"""Generic recipe extraction from HTML markup.

Each field is resolved on its own from an ordered list of selectors: schema.org
microdata first, then the class names popular recipe plugins use, then coarse
page-level fallbacks.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from familyhub_recipes.app.services.url_parsing.extractors.site_specific import SiteSpecificExtractor
from familyhub_recipes.app.services.url_parsing.models import RecipeRecord, RecipeSource
from familyhub_recipes.app.services.url_parsing.parsing_utils import (
    clean_text,
    decode_entities,
    extract_servings_number,
    format_duration,
)
from familyhub_recipes.app.services.url_parsing.selector_cascade import (
    ElementExtractor,
    SelectorCandidate,
    attribute,
    first_text,
    ingredient_list,
    instruction_list,
    resolve_field,
)

logger = logging.getLogger(__name__)

MIN_DESCRIPTION_LENGTH = 21


def _title_text(elements: List[Tag]) -> str:
    for element in elements:
        text = clean_text(decode_entities(element.get_text(" ", strip=True)))
        if text:
            return text
    return ""


def _duration_text(elements: List[Tag]) -> str:
    # Microdata durations keep the ISO value in content/datetime and prose in the text
    for element in elements:
        for attr in ("content", "datetime"):
            if element.has_attr(attr) and str(element[attr]).strip():
                return format_duration(str(element[attr]).strip())
        text = clean_text(element.get_text(" ", strip=True))
        if text:
            return format_duration(text)
    return ""


def _is_recipe_scope(element: Tag) -> bool:
    """True when the nearest enclosing microdata item is the Recipe itself."""
    scope = element.find_parent(attrs={"itemscope": True})
    if scope is None:
        return False
    return str(scope.get("itemtype") or "").rstrip("/").lower().endswith("recipe")


def recipe_property(extract_fn: ElementExtractor) -> ElementExtractor:
    """Apply ``extract_fn`` only to properties of the Recipe, not of nested items."""

    def extract(elements: List[Tag]) -> str:
        return extract_fn([element for element in elements if _is_recipe_scope(element)])

    return extract


def _servings_text(elements: List[Tag]) -> str:
    for element in elements:
        number = extract_servings_number(
            element.get_text(" ", strip=True) or str(element.get("content") or "")
        )
        if number:
            return number
    return ""


NAME_CANDIDATES = [
    SelectorCandidate("[itemtype*='Recipe'] [itemprop='name']", recipe_property(_title_text)),
    SelectorCandidate(".wprm-recipe-name", _title_text),
    SelectorCandidate(".tasty-recipes-title", _title_text),
    SelectorCandidate(".recipe-title", _title_text),
    SelectorCandidate("h1", _title_text),
    SelectorCandidate("title", _title_text),
]

DESCRIPTION_CANDIDATES = [
    SelectorCandidate(
        "[itemtype*='Recipe'] [itemprop='description']",
        recipe_property(attribute("content", prefer_text=True)),
    ),
    SelectorCandidate(".wprm-recipe-summary", first_text),
    SelectorCandidate(".recipe-summary", first_text),
    SelectorCandidate("meta[name='description']", attribute("content")),
    SelectorCandidate("meta[property='og:description']", attribute("content")),
]

INGREDIENT_CANDIDATES = [
    SelectorCandidate("[itemprop='recipeIngredient']", ingredient_list),
    SelectorCandidate("[itemprop='ingredients']", ingredient_list),
    SelectorCandidate(".wprm-recipe-ingredient", ingredient_list),
    SelectorCandidate(".tasty-recipes-ingredients li", ingredient_list),
    SelectorCandidate(".recipe-ingredients li", ingredient_list),
    SelectorCandidate(".ingredients li", ingredient_list),
    SelectorCandidate("#ingredients li", ingredient_list),
]

INSTRUCTION_CANDIDATES = [
    SelectorCandidate("[itemprop='recipeInstructions'] li", instruction_list),
    SelectorCandidate("[itemprop='recipeInstructions']", instruction_list),
    SelectorCandidate(".wprm-recipe-instruction-text", instruction_list),
    SelectorCandidate(".tasty-recipes-instructions li", instruction_list),
    SelectorCandidate(".recipe-instructions li", instruction_list),
    SelectorCandidate(".instructions li", instruction_list),
    SelectorCandidate(".directions li", instruction_list),
    SelectorCandidate("#instructions li", instruction_list),
]

COOK_TIME_CANDIDATES = [
    SelectorCandidate("[itemprop='cookTime']", _duration_text),
    SelectorCandidate("[itemprop='totalTime']", _duration_text),
    SelectorCandidate(".wprm-recipe-cook_time-container", _duration_text),
    SelectorCandidate(".wprm-recipe-total_time-container", _duration_text),
    SelectorCandidate(".tasty-recipes-cook-time", _duration_text),
    SelectorCandidate(".cook-time", _duration_text),
]

SERVINGS_CANDIDATES = [
    SelectorCandidate("[itemprop='recipeYield']", _servings_text),
    SelectorCandidate(".wprm-recipe-servings", _servings_text),
    SelectorCandidate(".tasty-recipes-yield", _servings_text),
    SelectorCandidate(".recipe-yield", _servings_text),
    SelectorCandidate(".servings", _servings_text),
    SelectorCandidate(".yield", _servings_text),
]

AUTHOR_CANDIDATES = [
    SelectorCandidate("[itemprop='author'] [itemprop='name']", first_text),
    SelectorCandidate("[itemprop='author']", attribute("content", prefer_text=True)),
    SelectorCandidate(".wprm-recipe-author", first_text),
    SelectorCandidate(".tasty-recipes-author-name", first_text),
    SelectorCandidate("[rel='author']", first_text),
    SelectorCandidate("meta[name='author']", attribute("content")),
    SelectorCandidate(".author-name", first_text),
]


class GenericHtmlExtractor:
    """Resolves every recipe field from common markup conventions."""

    name = "html-parsing"

    def __init__(
        self, site_name: str = "", site_specific: Optional[SiteSpecificExtractor] = None
    ) -> None:
        self.site_name = site_name
        self.site_specific = site_specific

    def extract(self, html: str, url: str) -> Optional[RecipeRecord]:
        soup = BeautifulSoup(html, "lxml")
        record = RecipeRecord(
            name=resolve_field(soup, NAME_CANDIDATES),
            description=resolve_field(soup, DESCRIPTION_CANDIDATES, min_length=MIN_DESCRIPTION_LENGTH),
            ingredients=resolve_field(soup, INGREDIENT_CANDIDATES),
            instructions=resolve_field(soup, INSTRUCTION_CANDIDATES),
            cook_time=resolve_field(soup, COOK_TIME_CANDIDATES),
            servings=resolve_field(soup, SERVINGS_CANDIDATES),
            author=resolve_field(soup, AUTHOR_CANDIDATES),
            site_name=self.site_name,
            source=RecipeSource.HTML_PARSING,
        )
        if self.site_specific is not None:
            record = self.site_specific.backfill(record, soup)
        found = [field for field in record.extracted_fields() if field != "siteName"]
        logger.info("Generic HTML extraction found fields: %s", ", ".join(found) or "none")
        if not found:
            return None
        return record


def extract_recipe_from_html(html: str, url: str, site_name: str = "") -> Optional[RecipeRecord]:
    """Extract recipe fields from markup when no structured data is available."""
    return GenericHtmlExtractor(site_name).extract(html, url)
