"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="BD Address Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Catalog
    data_dir: Optional[str] = Field(default=None)  # packaged data when unset

    # Search Configuration
    default_limit: int = Field(default=10)
    default_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    fuzzy_threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    max_query_length: int = Field(default=100)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = ConfigDict(
        env_prefix="BD_ADDRESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
