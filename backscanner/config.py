"""Configuration management using pydantic-settings."""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


DEFAULT_CHUNK_SIZE = 1024
DEFAULT_MAX_BUFFER_SIZE = 1024 * 1024


class Settings(BaseSettings):
    """Scanner defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BACKSCANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Scanner Configuration
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, description="Bytes pulled per source read")
    max_buffer_size: int = Field(default=DEFAULT_MAX_BUFFER_SIZE, description="Hard cap on buffered bytes")
    encoding: str = Field(default="utf-8", description="Encoding used when decoding lines to text")
    errors: str = Field(default="replace", description="Decode error handler")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_file: Optional[str] = Field(default=None, description="Log file path")


# Global settings instance
settings = Settings()
