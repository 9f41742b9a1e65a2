from bs4 import BeautifulSoup

from familyhub_recipes.app.services.url_parsing.extractors.generic import (
    GenericHtmlExtractor,
    extract_recipe_from_html,
)
from familyhub_recipes.app.services.url_parsing.extractors.site_specific import SiteSpecificExtractor
from familyhub_recipes.app.services.url_parsing.models import RecipeSource
from familyhub_recipes.app.services.url_parsing.selector_cascade import (
    SelectorCandidate,
    first_text,
    resolve_field,
)


def test_microdata_recipe():
    html = """
    <html><body>
      <div itemscope itemtype="http://schema.org/Recipe">
        <h1 itemprop="name">Microdata Pancakes</h1>
        <span itemprop="author">Jane Cook</span>
        <time itemprop="cookTime" datetime="PT20M">20 mins</time>
        <span itemprop="recipeYield">Serves 4</span>
        <ul>
          <li itemprop="recipeIngredient">1 cup flour</li>
          <li itemprop="recipeIngredient">1 egg</li>
        </ul>
        <ol itemprop="recipeInstructions">
          <li>Whisk everything.</li>
          <li>Fry in a pan.</li>
        </ol>
      </div>
    </body></html>
    """
    record = extract_recipe_from_html(html, "https://example.com/pancakes", "example.com")
    assert record is not None
    assert record.source == RecipeSource.HTML_PARSING
    assert record.name == "Microdata Pancakes"
    assert record.author == "Jane Cook"
    assert record.cook_time == "20 minutes"
    assert record.servings == "4"
    assert record.ingredients == "1 cup flour\n1 egg"
    assert record.instructions == "1. Whisk everything.\n\n2. Fry in a pan."


def test_microdata_name_ignores_nested_items():
    html = """
    <html><body>
      <div itemscope itemtype="https://schema.org/Recipe">
        <div itemprop="author" itemscope itemtype="https://schema.org/Person">
          <span itemprop="name">Jane Cook</span>
        </div>
        <div itemprop="recipeInstructions" itemscope itemtype="https://schema.org/HowToStep">
          <span itemprop="name">Whisk</span>
        </div>
        <h2 itemprop="name">Nested Scope Waffles</h2>
      </div>
    </body></html>
    """
    record = extract_recipe_from_html(html, "https://example.com/waffles")
    assert record.name == "Nested Scope Waffles"
    assert record.author == "Jane Cook"


def test_class_name_conventions_and_heading_rows():
    html = """
    <html><head>
      <title>Ignored Title</title>
      <meta name="description" content="Too short">
      <meta property="og:description" content="A hearty chili that feeds a crowd on game day.">
    </head><body>
      <h1>Game Day Chili</h1>
      <div class="recipe-ingredients"><ul>
        <li>Ingredients</li>
        <li>1 lb ground beef</li>
        <li>2 cans beans</li>
      </ul></div>
      <div class="recipe-instructions"><ol>
        <li>Directions:</li>
        <li>Brown the beef.</li>
        <li>Add beans and simmer.</li>
      </ol></div>
      <span class="servings">6 bowls</span>
    </body></html>
    """
    record = extract_recipe_from_html(html, "https://example.com/chili")
    assert record.name == "Game Day Chili"
    assert record.description == "A hearty chili that feeds a crowd on game day."
    assert record.ingredients == "1 lb ground beef\n2 cans beans"
    assert record.instructions == "1. Brown the beef.\n\n2. Add beans and simmer."
    assert record.servings == "6"
    assert record.cook_time == ""
    assert record.author == ""


def test_title_only_page_keeps_empty_strings():
    html = "<html><head><title>Grandma&#39;s &quot;Famous&quot; Stew &amp; Dumplings</title></head><body><p>Hello</p></body></html>"
    record = extract_recipe_from_html(html, "https://example.com/stew", "example.com")
    assert record is not None
    assert record.name == 'Grandma\'s "Famous" Stew & Dumplings'
    assert record.source == RecipeSource.HTML_PARSING
    assert record.description == ""
    assert record.ingredients == ""
    assert record.instructions == ""
    assert record.cook_time == ""
    assert record.servings == ""
    assert record.author == ""


def test_empty_page_returns_none():
    assert extract_recipe_from_html("<html><body></body></html>", "https://example.com/empty") is None


def test_site_selectors_used_on_known_host():
    html = """
    <html><head><title>Slow Cooker Ribs</title></head><body>
      <ul class="ingredient-list"><li>2 racks ribs</li><li>1 cup barbecue sauce</li></ul>
      <ol class="direction-list"><li>Rub the ribs.</li><li>Cook on low for 8 hours.</li></ol>
    </body></html>
    """
    extractor = GenericHtmlExtractor("Food.com", SiteSpecificExtractor("food.com"))
    record = extractor.extract(html, "https://www.food.com/recipe/ribs-1")
    assert record.ingredients == "2 racks ribs\n1 cup barbecue sauce"
    assert record.instructions == "1. Rub the ribs.\n\n2. Cook on low for 8 hours."
    assert record.source == RecipeSource.HTML_PARSING


def test_resolve_field_first_match_wins():
    soup = BeautifulSoup(
        "<div class='a'>short</div><div class='b'>a longer value here</div>", "lxml"
    )
    candidates = [
        SelectorCandidate(".missing", first_text),
        SelectorCandidate(".a", first_text),
        SelectorCandidate(".b", first_text),
    ]
    assert resolve_field(soup, candidates) == "short"
    assert resolve_field(soup, candidates, min_length=10) == "a longer value here"
    assert resolve_field(soup, candidates[:1]) == ""
