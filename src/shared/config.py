"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenAI / LLM
    openai_api_key: SecretStr = Field(default=SecretStr(""))
    openai_model: str = Field(default="gpt-4o-mini")
    openai_base_url: Optional[str] = Field(
        default=None, description="Override for OpenAI-compatible endpoints"
    )

    # Matcher settings
    matcher_temperature: float = Field(default=0.2)
    matcher_max_tokens: int = Field(default=1500)
    analysis_timeout_seconds: float = Field(
        default=30.0, description="Wall-clock budget for a single job analysis"
    )
    scoring_service_url: Optional[str] = Field(
        default=None,
        description="If set, jobs are scored by POSTing to this HTTP service instead of OpenAI",
    )

    # Export settings
    export_list_delimiter: str = Field(
        default=" | ", description="Separator for pros/cons/keywords in exported CSV"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
