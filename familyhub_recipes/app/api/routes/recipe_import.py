from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from familyhub_recipes.app.core.config import get_settings
from familyhub_recipes.app.schemas.recipe_import import (
    ErrorResponse,
    RecipeImportRequest,
    RecipeImportResponse,
)
from familyhub_recipes.app.services import recipe_importer

router = APIRouter(tags=["recipe-import"])


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": get_settings().cors_allow_origin,
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
    }


@router.options("/recipe-import", include_in_schema=False)
async def recipe_import_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK, headers=cors_headers())


@router.post(
    "/recipe-import",
    response_model=RecipeImportResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def import_recipe_from_url(payload: RecipeImportRequest, response: Response):
    """Import a recipe from a URL.

    Always answers 200 with a usable recipe once a URL is supplied; fetch and
    parse failures come back as the ``fallback`` record.
    """
    response.headers.update(cors_headers())
    url = (payload.url or "").strip()
    if not url:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "URL is required"},
            headers=cors_headers(),
        )
    return await recipe_importer.import_recipe(url)


@router.api_route(
    "/recipe-import",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE"],
    include_in_schema=False,
)
async def recipe_import_method_not_allowed() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content={"error": "Method not allowed"},
        headers=cors_headers() | {"Allow": "POST, OPTIONS"},
    )
