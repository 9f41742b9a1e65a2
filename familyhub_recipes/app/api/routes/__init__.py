from fastapi import APIRouter

from familyhub_recipes.app.api.routes import recipe_import

api_router = APIRouter()
api_router.include_router(recipe_import.router)
