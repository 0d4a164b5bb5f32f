"""Application configuration via Pydantic Settings."""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API Settings
    PROJECT_NAME: str = "Binder Core API"
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"

    # CORS Settings
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # Default caps for entropy and cap status when a request omits them
    # (guardrails: inbox 10-30, tasks 15-50)
    DEFAULT_INBOX_CAP: int = 20
    DEFAULT_TASK_CAP: int = 30


# Global settings instance
settings = Settings()
