"""Selector cascade shared by the markup-based extractors.

Every field is resolved from an ordered list of ``SelectorCandidate`` entries.
The first candidate whose extractor returns a long enough string wins and the
rest are not evaluated.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence

from bs4 import BeautifulSoup, Tag

from familyhub_recipes.app.services.url_parsing.parsing_utils import (
    clean_items,
    clean_text,
    join_ingredients,
    number_instructions,
)

ElementExtractor = Callable[[List[Tag]], str]


@dataclass(frozen=True)
class SelectorCandidate:
    selector: str
    extract: ElementExtractor


def resolve_field(
    soup: BeautifulSoup, candidates: Sequence[SelectorCandidate], min_length: int = 1
) -> str:
    """Return the first candidate result at least ``min_length`` characters long."""
    for candidate in candidates:
        elements = soup.select(candidate.selector)
        if not elements:
            continue
        value = candidate.extract(elements)
        if value and len(value) >= min_length:
            return value
    return ""


def element_text(element: Tag) -> str:
    """Visible text of ``element``, falling back to ``content``/``datetime`` attributes."""
    text = clean_text(element.get_text(" ", strip=True))
    if text:
        return text
    for attr in ("content", "datetime"):
        if element.has_attr(attr):
            return clean_text(str(element[attr]))
    return ""


def first_text(elements: List[Tag]) -> str:
    for element in elements:
        text = element_text(element)
        if text:
            return text
    return ""


def attribute(name: str, prefer_text: bool = False) -> ElementExtractor:
    """Extractor reading attribute ``name`` from the first element that carries it.

    With ``prefer_text`` the element text is tried first, which suits microdata
    nodes like ``<span itemprop="recipeYield">4 servings</span>``.
    """

    def extract(elements: List[Tag]) -> str:
        for element in elements:
            if prefer_text:
                text = clean_text(element.get_text(" ", strip=True))
                if text:
                    return text
            if element.has_attr(name):
                value = clean_text(str(element[name]))
                if value:
                    return value
        return ""

    return extract


def element_texts(elements: List[Tag]) -> List[str]:
    return clean_items(element.get_text(" ", strip=True) for element in elements)


def ingredient_list(elements: List[Tag]) -> str:
    return join_ingredients(element_texts(elements))


def instruction_list(elements: List[Tag]) -> str:
    return number_instructions(element_texts(elements))
