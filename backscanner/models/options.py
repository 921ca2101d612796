"""Scanner option models."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ..config import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_BUFFER_SIZE, Settings


SIZE_DEFAULTS = {
    "chunk_size": DEFAULT_CHUNK_SIZE,
    "max_buffer_size": DEFAULT_MAX_BUFFER_SIZE,
}


class ScannerOptions(BaseModel):
    """Tunables for a BackScanner.

    Non-positive or missing sizes fall back to the built-in defaults instead
    of failing validation.
    """

    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, description="Bytes pulled per source read")
    max_buffer_size: int = Field(default=DEFAULT_MAX_BUFFER_SIZE, description="Hard cap on buffered bytes")
    encoding: str = Field(default="utf-8", description="Encoding for line()")
    errors: str = Field(default="replace", description="Decode error handler for line()")

    @field_validator('chunk_size', 'max_buffer_size', mode='before')
    @classmethod
    def fill_missing_size(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat an absent size as the default."""
        if v is None:
            return SIZE_DEFAULTS[info.field_name]
        return v

    @field_validator('chunk_size', 'max_buffer_size')
    @classmethod
    def replace_non_positive_size(cls, v: int, info: ValidationInfo) -> int:
        """Replace a non-positive size with the default."""
        if v <= 0:
            return SIZE_DEFAULTS[info.field_name]
        return v

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScannerOptions":
        """Build options from loaded settings."""
        return cls(
            chunk_size=settings.chunk_size,
            max_buffer_size=settings.max_buffer_size,
            encoding=settings.encoding,
            errors=settings.errors,
        )
