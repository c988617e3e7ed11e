"""
Application configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="QUIZGRADE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Quiz Grading Service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or text
    LOG_FILE: Optional[str] = None

    # Question storage
    DATA_DIR: str = "data"
    QUESTION_BANK_FILE: str = "questionBank.json"
    TEMPLATES_FILE: str = "quizTemplates.json"

    # Grading policy
    DEFAULT_PASSING_SCORE: float = 50.0
    PASS_BASIS: Literal["count", "score"] = "count"
    REVEAL_ANSWERS_DEFAULT: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
