"""Application configuration loaded from environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra environment variables
    )

    # Store for profiles and streaks (Postgres when set, in-memory otherwise)
    database_url: str | None = None

    # Quote source for gold / fund / market questions
    market_data_source: Literal["simulated", "yfinance"] = "simulated"

    # Open conversations kept in memory before the least recently used is dropped
    max_sessions: int = 10000

    # Artificial "typing" delay before a reply is sent
    response_delay_seconds: float = 0.0

    # API Authentication
    api_token: str

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False


settings = Settings()
