"""Application configuration settings."""
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import model_validator
from typing import List

# Get the server directory path
SERVER_DIR = Path(__file__).parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Gemini
    GEMINI_API_KEY: str
    GEMINI_ENDPOINT: str = "https://generativelanguage.googleapis.com"
    GEMINI_MODEL: str = "gemini-3-flash-preview"

    # Per-call LLM timeout (seconds)
    LLM_TIMEOUT: int = 30

    # Response cache
    CACHE_MAX_ENTRIES: int = 512
    CACHE_TTL_SECONDS: int = 24 * 60 * 60

    # Degraded operation: serve cached answers only
    OFFLINE_MODE: bool = False

    DEFAULT_LANGUAGE: str = "en"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # CORS: explicit list of allowed origins
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Rate limiting
    RATE_LIMIT_PER_MINUTE: int = 60

    @model_validator(mode="after")
    def _validate_cache(self) -> "Settings":
        if self.CACHE_MAX_ENTRIES < 1:
            raise ValueError("CACHE_MAX_ENTRIES must be at least 1.")
        if self.CACHE_TTL_SECONDS < 1:
            raise ValueError("CACHE_TTL_SECONDS must be at least 1 second.")
        return self

    class Config:
        env_file = str(SERVER_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Global settings instance
settings = Settings()
