"""Library configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Default assertion settings loaded from PARAMASSERT_* environment variables."""

    # Diagnostics
    DEBUG: bool = True
    LOG_LEVEL: str = "info"
    LOG_JSON: bool = False

    # Validation defaults
    ALLOW_USELESS_PROPERTY: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PARAMASSERT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
