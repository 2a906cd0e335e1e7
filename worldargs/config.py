"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DATABASE_URL: str = "sqlite:///./sandbox.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 컨텍스트 단축어 탐색 범위
    SIGHT_DISTANCE: int = 50
    ENTITY_SEARCH_DISTANCE: float = 25.0
    ENTITY_TOLERANCE: float = 1.5


settings = Settings()
