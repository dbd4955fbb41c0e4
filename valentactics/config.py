"""Application configuration loaded from environment variables and .env file."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Alternate scoring provider
    AI_PROVIDER: str = "mock"
    AI_API_KEY: Optional[str] = None
    AI_MODEL: Optional[str] = None
    AI_TEMPERATURE: float = 0.2
    REMOTE_ANALYSIS_ENABLED: bool = False

    # Scoring
    RANDOM_SEED: Optional[int] = None
    GIFT_CATALOG_PATH: Optional[str] = None


settings = Settings()
