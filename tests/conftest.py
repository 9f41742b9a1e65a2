import pytest
from fastapi.testclient import TestClient

from familyhub_recipes.app.core.config import get_settings
from familyhub_recipes.app.main import create_app


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def recipe_json_ld_html():
    return """
    <html>
      <head>
        <title>Lemon Cake | Example Kitchen</title>
        <script type="application/ld+json">
        {
          "@context": "https://schema.org",
          "@type": "Recipe",
          "name": "Lemon Cake",
          "description": "A bright, tangy cake.",
          "author": {"@type": "Person", "name": "Ada Baker"},
          "recipeIngredient": ["2 cups flour", "1 cup sugar", "2 lemons"],
          "recipeInstructions": [
            {"@type": "HowToStep", "text": "Preheat oven"},
            {"@type": "HowToStep", "text": "Mix batter"}
          ],
          "cookTime": "PT1H30M",
          "recipeYield": "8 servings"
        }
        </script>
      </head>
      <body><h1>Lemon Cake</h1></body>
    </html>
    """
