import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    scraper_user_agent: str = Field(
        "Mozilla/5.0 (compatible; FamilyHub-RecipeBot/1.0)",
        alias="SCRAPER_USER_AGENT",
    )
    scraper_accept_language: str = Field("en-US,en;q=0.5", alias="SCRAPER_ACCEPT_LANGUAGE")
    # Upstream recipe sites get 8-10 seconds before the import degrades to the fallback record
    fetch_timeout_seconds: float = Field(8.0, ge=8.0, le=10.0, alias="FETCH_TIMEOUT_SECONDS")
    cors_allow_origin: str = Field("*", alias="CORS_ALLOW_ORIGIN")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
