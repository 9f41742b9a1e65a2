#!/usr/bin/env python
"""
Import a single recipe URL and print the JSON the API would return.

Run manually:
    python scripts/import_recipe.py https://www.allrecipes.com/recipe/123
"""
import asyncio
import logging
import sys

from familyhub_recipes.app.services.recipe_importer import import_recipe

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("import_recipe")


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print(f"usage: {argv[0]} <recipe-url>", file=sys.stderr)
        return 2
    result = asyncio.run(import_recipe(argv[1]))
    print(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    return 0 if result.source != "fallback" else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
