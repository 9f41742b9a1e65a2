from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from familyhub_recipes.app.services.url_parsing.models import RecipeRecord, RecipeSource


class RecipeImportRequest(BaseModel):
    url: Optional[str] = None


class RecipeImportResponse(BaseModel):
    success: bool = True
    recipe: RecipeRecord
    source: RecipeSource
    message: Optional[str] = None
    debug: Dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: str
