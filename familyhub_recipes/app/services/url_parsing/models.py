"""Pydantic models for URL recipe importing."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class RecipeSource(str, Enum):
    """Which extraction strategy produced a recipe record."""

    STRUCTURED_DATA = "structured-data"
    HTML_PARSING = "html-parsing"
    FALLBACK = "fallback"


class RecipeRecord(BaseModel):
    """A normalized recipe ready to prefill the meal-plan form.

    Every field is a plain string so the client can bind it directly.
    """

    name: str = ""
    description: str = ""
    ingredients: str = ""
    instructions: str = ""
    cook_time: str = ""
    servings: str = ""
    author: str = ""
    site_name: str = ""
    source: RecipeSource = RecipeSource.HTML_PARSING

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )

    @field_validator(
        "name",
        "description",
        "ingredients",
        "instructions",
        "cook_time",
        "servings",
        "author",
        "site_name",
        mode="before",
    )
    @classmethod
    def _coerce_to_str(cls, value):
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value

    def extracted_fields(self) -> list[str]:
        """Names (as serialized) of the fields that carry data."""
        dumped = self.model_dump(by_alias=True, exclude={"source"})
        return [key for key, value in dumped.items() if value]
