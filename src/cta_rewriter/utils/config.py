"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Keys
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    google_api_key: Optional[str] = None

    # Model Configuration
    openai_model: str = "gpt-4o-mini"
    anthropic_model: str = "claude-sonnet-4-20250514"
    google_model: str = "gemini-2.0-flash"
    temperature: float = 0.7
    default_max_tokens: int = 1024

    # Prompt and output
    keep_words_policy: Literal["hard", "soft"] = "hard"
    cta_link_href: str = "#"

    # Application Settings
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5001

    # Timeouts (in seconds)
    model_timeout: float = 30.0

    def validate_api_keys(self) -> dict[str, bool]:
        """Check which API keys are configured."""
        return {
            "openai": bool(self.openai_api_key),
            "anthropic": bool(self.anthropic_api_key),
            "google": bool(self.google_api_key),
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
