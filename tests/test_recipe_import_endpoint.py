import pytest

from familyhub_recipes.app.services import recipe_importer
from familyhub_recipes.app.services.url_parsing.errors import FetchTimeoutError


def _serve(monkeypatch, html: str):
    async def fake_fetch(url: str):
        return html

    monkeypatch.setattr(recipe_importer, "fetch_html", fake_fetch)


def test_import_structured_recipe(monkeypatch, client, recipe_json_ld_html):
    _serve(monkeypatch, recipe_json_ld_html)

    response = client.post("/recipe-import", json={"url": "https://www.allrecipes.com/recipe/123"})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    body = response.json()
    assert body["success"] is True
    assert body["source"] == "structured-data"
    assert "message" not in body
    recipe = body["recipe"]
    assert recipe["name"] == "Lemon Cake"
    assert recipe["cookTime"] == "1 hours 30 minutes"
    assert recipe["siteName"] == "AllRecipes"
    assert recipe["source"] == "structured-data"
    assert recipe["instructions"] == "1. Preheat oven\n\n2. Mix batter"
    assert body["debug"]["siteName"] == "AllRecipes"


def test_import_timeout_returns_fallback_with_200(monkeypatch, client):
    async def slow_fetch(url: str):
        raise FetchTimeoutError("Timed out after 8 seconds")

    monkeypatch.setattr(recipe_importer, "fetch_html", slow_fetch)

    response = client.post("/recipe-import", json={"url": "https://tasty.co/recipe/pancakes"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["source"] == "fallback"
    assert body["message"] == recipe_importer.FALLBACK_MESSAGE
    assert body["recipe"]["ingredients"] == recipe_importer.FALLBACK_INGREDIENTS
    assert body["recipe"]["instructions"] == recipe_importer.FALLBACK_INSTRUCTIONS
    assert body["recipe"]["name"] == "Recipe from Tasty"
    assert set(body["recipe"]) == {
        "name",
        "description",
        "ingredients",
        "instructions",
        "cookTime",
        "servings",
        "author",
        "siteName",
        "source",
    }


def test_html_parsing_response(monkeypatch, client):
    _serve(monkeypatch, "<html><head><title>Plain Page</title></head><body></body></html>")

    response = client.post("/recipe-import", json={"url": "https://example.com/plain"})
    body = response.json()
    assert body["source"] == "html-parsing"
    assert body["recipe"]["name"] == "Plain Page"
    assert body["recipe"]["servings"] == ""
    assert body["debug"]["extractedFields"] == ["name", "siteName"]


def test_missing_url_is_400(client):
    response = client.post("/recipe-import", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "URL is required"}


def test_blank_url_is_400(client):
    response = client.post("/recipe-import", json={"url": "   "})
    assert response.status_code == 400
    assert response.json()["error"] == "URL is required"


def test_missing_body_is_400(client):
    response = client.post("/recipe-import")
    assert response.status_code == 400
    assert response.json()["error"] == "URL is required"


def test_malformed_url_is_fallback_not_error(client):
    response = client.post("/recipe-import", json={"url": "not-a-url"})
    assert response.status_code == 200
    body = response.json()
    assert body["source"] == "fallback"
    assert body["recipe"]["siteName"] == "Unknown Site"


def test_get_is_405(client):
    response = client.get("/recipe-import")
    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}


@pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE", "TRACE"])
def test_other_methods_are_405(client, method):
    response = client.request(method, "/recipe-import")
    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}
    assert response.headers["allow"] == "POST, OPTIONS"
    assert response.headers["access-control-allow-origin"] == "*"


def test_head_is_405_with_cors_headers(client):
    response = client.head("/recipe-import")
    assert response.status_code == 405
    assert response.headers["allow"] == "POST, OPTIONS"
    assert response.headers["access-control-allow-origin"] == "*"


def test_options_preflight(client):
    response = client.options("/recipe-import")
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_wrong_url_type_is_400(client):
    response = client.post("/recipe-import", json={"url": ["https://example.com"]})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request payload."
    assert body["details"][0]["field"] == "body.url"
