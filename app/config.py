"""Configuration management for the application."""
from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    API_TITLE: str = "Biblical Wisdom Guide"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # OpenAI
    OPENAI_API_KEY: Optional[str] = None  # not validated here; the client reports auth failures
    OPENAI_MODEL: str = "gpt-4"
    OPENAI_TEMPERATURE: float = 0.7

    # Verse lookup (public domain KJV API)
    BIBLE_API_BASE_URL: str = "https://bible-api.com"
    BIBLE_API_TRANSLATION: str = "kjv"
    BIBLE_API_TIMEOUT: float = 15.0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore any extra env vars not defined here


settings = Settings()
