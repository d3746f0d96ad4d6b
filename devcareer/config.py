"""
Configuration for the DevCareer AI tools backend.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


SUPPORTED_LANGUAGES = (
    "javascript", "python", "java", "cpp", "csharp",
    "php", "ruby", "go", "rust", "swift",
)


@dataclass(frozen=True)
class GeminiConfig:
    """Read-only Gemini client configuration, built once at startup."""

    api_key: str
    model: str
    temperature: float
    max_tokens: int
    timeout_seconds: float

    @property
    def configured(self) -> bool:
        return bool(self.api_key)


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=5000)
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    # Gemini
    GEMINI_API_KEY: str = Field(default="")
    GEMINI_MODEL: str = Field(default="gemini-2.0-flash")
    MAX_TOKENS: int = Field(default=8192)
    TEMPERATURE: float = Field(default=0.4)
    GEMINI_TIMEOUT_SECONDS: int = Field(default=60)

    # CORS
    ALLOWED_ORIGINS: str = Field(default="http://localhost:3000,http://localhost:5173")

    # Request limits
    MAX_REQUEST_SIZE: int = Field(default=1_048_576)  # 1 MB
    MAX_CODE_LENGTH: int = Field(default=50_000)

    # Rate limiting
    REDIS_URL: Optional[str] = Field(default=None)
    DAILY_RATE_LIMIT: int = Field(default=100)
    RATE_LIMIT_TIMEZONE: str = Field(default="UTC")
    REDIS_TIMEOUT_SECONDS: int = Field(default=2)

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]
        if "*" in origins:
            return ["*"]
        return origins

    @property
    def rate_limiting_enabled(self) -> bool:
        return bool(self.REDIS_URL)

    def gemini_config(self) -> GeminiConfig:
        return GeminiConfig(
            api_key=self.GEMINI_API_KEY,
            model=self.GEMINI_MODEL,
            temperature=self.TEMPERATURE,
            max_tokens=self.MAX_TOKENS,
            timeout_seconds=float(self.GEMINI_TIMEOUT_SECONDS),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


# Logging setup
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("google").setLevel(logging.WARNING)

logger = logging.getLogger("devcareer")
