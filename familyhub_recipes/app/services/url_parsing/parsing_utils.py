"""General parsing utilities for recipe extraction."""

import html
import re
from typing import Iterable, List, Optional
from urllib.parse import urlparse

UNKNOWN_SITE = "Unknown Site"

FRIENDLY_SITE_NAMES = {
    "allrecipes.com": "AllRecipes",
    "foodnetwork.com": "Food Network",
    "bonappetit.com": "Bon Appétit",
    "epicurious.com": "Epicurious",
    "tasty.co": "Tasty",
    "food.com": "Food.com",
}

HEADING_LABELS = {
    "ingredient",
    "ingredients",
    "direction",
    "directions",
    "instruction",
    "instructions",
    "method",
    "preparation",
    "step",
    "steps",
}

_HOURS_RE = re.compile(r"(\d+)H")
_MINUTES_RE = re.compile(r"(\d+)M")


def clean_text(text: str) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def decode_entities(text: str) -> str:
    """Decode HTML entities such as ``&quot;`` and ``&amp;``."""
    return html.unescape(text or "")


def format_duration(value) -> str:
    """Render an ISO-8601 duration (``PT1H30M``) as ``1 hours 30 minutes``.

    Anything that does not start with ``PT`` is returned unchanged.
    """
    if not value:
        return ""
    value = str(value).strip()
    if not value.startswith("PT"):
        return value
    hours = _HOURS_RE.search(value)
    minutes = _MINUTES_RE.search(value)
    result = ""
    if hours:
        result += f"{hours.group(1)} hours "
    if minutes:
        result += f"{minutes.group(1)} minutes"
    return result.strip()


def get_host(url: str) -> str:
    """Lowercased host of ``url`` with a leading ``www.`` removed."""
    try:
        hostname = urlparse(url).hostname or ""
    except ValueError:
        return ""
    hostname = hostname.lower()
    if hostname.startswith("www."):
        hostname = hostname[len("www."):]
    return hostname


def get_site_name(url: Optional[str]) -> str:
    """Friendly display name for the site hosting ``url``."""
    if not url:
        return UNKNOWN_SITE
    host = get_host(url)
    if not host:
        return UNKNOWN_SITE
    return FRIENDLY_SITE_NAMES.get(host, host)


def resolve_author(value) -> str:
    """Resolve a schema.org author (string, ``{name}`` object or list) to a name."""
    if not value:
        return ""
    if isinstance(value, str):
        return clean_text(value)
    if isinstance(value, dict):
        return clean_text(str(value.get("name") or ""))
    if isinstance(value, list):
        for item in value:
            name = resolve_author(item)
            if name:
                return name
    return ""


def is_heading_label(text: str) -> bool:
    """True for section labels like "Ingredients:" picked up as list items."""
    return clean_text(text).rstrip(":").lower() in HEADING_LABELS


def clean_items(items: Iterable[str], drop_headings: bool = True) -> List[str]:
    """Trim items and drop empties, keeping order.

    Heading labels are dropped too unless ``drop_headings`` is false; markup
    lists pick them up as rows, structured data lists are taken as published.
    """
    cleaned = []
    for item in items:
        text = clean_text(item)
        if text and not (drop_headings and is_heading_label(text)):
            cleaned.append(text)
    return cleaned


def join_ingredients(items: Iterable[str], drop_headings: bool = True) -> str:
    return "\n".join(clean_items(items, drop_headings))


def number_instructions(steps: Iterable[str], drop_headings: bool = True) -> str:
    """Number steps as ``"1. ..."`` and separate them with a blank line."""
    items = clean_items(steps, drop_headings)
    return "\n\n".join(f"{idx}. {step}" for idx, step in enumerate(items, start=1))


def ingredient_texts(ingredients) -> List[str]:
    """Extract ingredient lines from ``recipeIngredient`` values."""
    if isinstance(ingredients, str):
        return [ingredients]
    lines: List[str] = []
    if isinstance(ingredients, list):
        for entry in ingredients:
            if isinstance(entry, str):
                lines.append(entry)
            elif isinstance(entry, dict) and entry.get("text"):
                lines.append(str(entry["text"]))
    return lines


def instruction_texts(instructions) -> List[str]:
    """Extract step text from the various ``recipeInstructions`` shapes.

    Handles plain strings, ``HowToStep`` objects carrying ``text`` or
    ``name``, and ``HowToSection`` objects whose steps live under
    ``itemListElement``.
    """
    steps: List[str] = []
    if isinstance(instructions, str):
        steps.append(instructions)
    elif isinstance(instructions, dict):
        if "itemListElement" in instructions:
            steps.extend(instruction_texts(instructions["itemListElement"]))
        else:
            text_val = instructions.get("text") or instructions.get("name")
            if text_val:
                steps.append(str(text_val))
    elif isinstance(instructions, list):
        for entry in instructions:
            steps.extend(instruction_texts(entry))
    return [clean_text(decode_entities(s)) for s in steps if clean_text(s)]


def yield_text(value) -> str:
    """Servings from ``recipeYield``: first entry of a list, numbers as text."""
    if isinstance(value, list):
        value = next((item for item in value if item not in (None, "")), "")
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return clean_text(str(value))


def extract_servings_number(text: str) -> str:
    """First number in a yield/servings string, e.g. "Serves 4" -> "4"."""
    match = re.search(r"\d+", text or "")
    return match.group() if match else ""
