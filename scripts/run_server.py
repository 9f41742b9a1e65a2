#!/usr/bin/env python
"""
Run the recipe import API locally.

Run manually:
    python scripts/run_server.py
"""
import logging
import os

import uvicorn

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("recipe_server")


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info("Starting recipe import API on %s:%d", host, port)
    uvicorn.run("familyhub_recipes.app.main:app", host=host, port=port)


if __name__ == "__main__":
    main()
