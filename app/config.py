"""
Application settings.

Loaded from environment variables (or a local ``.env`` file) and validated
once per process.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Content backend
    # -------------------------------------------------------------------------
    content_backend: Literal["json", "wordpress"] = Field(
        default="json",
        description="Where content is read from: a JSON export or a live WordPress REST API",
    )
    content_export_path: str = Field(
        default="data/sample_content.json",
        description="Path to the JSON content export (json backend)",
    )
    wordpress_url: Optional[str] = Field(
        default=None,
        description="Site root of the WordPress install (wordpress backend)",
    )
    wordpress_timeout: float = Field(default=15.0, gt=0, description="REST API timeout in seconds")

    # -------------------------------------------------------------------------
    # SEO
    # -------------------------------------------------------------------------
    seo_extension: Literal[
        "auto", "yoast", "rankmath", "aioseo", "seopress", "seoframework", "slimseo", "none"
    ] = Field(
        default="auto",
        description="Force an SEO extension instead of detecting it from the content store",
    )
    site_language: str = Field(
        default="en-US",
        description="Language reported when the content store does not expose one",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
