"""Per-site CSS selectors for popular recipe sites.

Used to patch ingredient and instruction lists that structured data or the
generic selectors left empty or implausibly short. Register additional sites
by adding to ``SITE_SELECTORS``.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from bs4 import BeautifulSoup

from familyhub_recipes.app.services.url_parsing.models import RecipeRecord
from familyhub_recipes.app.services.url_parsing.selector_cascade import (
    ingredient_list,
    instruction_list,
)

logger = logging.getLogger(__name__)

# Lists shorter than this are treated as missing
MIN_LIST_TEXT_LENGTH = 15


@dataclass(frozen=True)
class SiteSelectors:
    ingredients: str
    instructions: str


SITE_SELECTORS: Dict[str, SiteSelectors] = {
    "allrecipes.com": SiteSelectors(
        ingredients=".mm-recipes-structured-ingredients__list-item, .mntl-structured-ingredients__list-item, .ingredients-item-name",
        instructions=".mm-recipes-steps__content li p, .mntl-sc-block-group--LI p, .instructions-section-item p",
    ),
    "foodnetwork.com": SiteSelectors(
        ingredients=".o-Ingredients__a-Ingredient--CheckboxLabel, .o-Ingredients__a-Ingredient",
        instructions=".o-Method__m-Step",
    ),
    "bonappetit.com": SiteSelectors(
        ingredients="[data-testid='IngredientList'] [class*='Description']",
        instructions="[data-testid='InstructionsWrapper'] li p",
    ),
    "epicurious.com": SiteSelectors(
        ingredients="[data-testid='IngredientList'] [class*='Description']",
        instructions="[data-testid='InstructionsWrapper'] li p",
    ),
    "tasty.co": SiteSelectors(
        ingredients=".ingredients__section li, .ingredient",
        instructions=".preparation li, .prep-steps li",
    ),
    "food.com": SiteSelectors(
        ingredients=".ingredient-list li, .recipe-ingredients li",
        instructions=".direction-list li, .recipe-directions__step",
    ),
    "seriouseats.com": SiteSelectors(
        ingredients=".structured-ingredients__list-item",
        instructions=".structured-project__steps li p, #structured-project__steps_1-0 li p",
    ),
    "simplyrecipes.com": SiteSelectors(
        ingredients=".structured-ingredients__list-item",
        instructions="#structured-project__steps_1-0 li p, .structured-project__steps li p",
    ),
    "bbcgoodfood.com": SiteSelectors(
        ingredients=".recipe__ingredients li",
        instructions=".recipe__method-steps li",
    ),
}


def selectors_for_host(host: str) -> Optional[SiteSelectors]:
    """Selectors for ``host`` or any of its parent domains.

    Matching is on domain-label boundaries so ``bbcgoodfood.com`` does not pick
    up the ``food.com`` entry.
    """
    host = (host or "").lower().rstrip(".")
    if not host:
        return None
    for domain, selectors in SITE_SELECTORS.items():
        if host == domain or host.endswith("." + domain):
            return selectors
    return None


def is_missing(value: str) -> bool:
    return len((value or "").strip()) < MIN_LIST_TEXT_LENGTH


class SiteSpecificExtractor:
    """Fills ingredient/instruction gaps using a known site's own markup."""

    name = "site-specific"

    def __init__(self, host: str) -> None:
        self.host = host
        self.selectors = selectors_for_host(host)

    def backfill(self, record: RecipeRecord, soup: BeautifulSoup) -> RecipeRecord:
        """Return ``record`` with short ingredient/instruction text replaced, if possible."""
        if self.selectors is None:
            return record

        updates = {}
        if is_missing(record.ingredients):
            ingredients = ingredient_list(soup.select(self.selectors.ingredients))
            if ingredients:
                updates["ingredients"] = ingredients
        if is_missing(record.instructions):
            instructions = instruction_list(soup.select(self.selectors.instructions))
            if instructions:
                updates["instructions"] = instructions

        if updates:
            logger.info("Backfilled %s from %s selectors", ", ".join(sorted(updates)), self.host)
            return record.model_copy(update=updates)
        return record
