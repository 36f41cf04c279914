"""
Shared configuration management for the Movie Catalog Gateway.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


MEMBER_VIDEOS_URL = "https://matlusstorage.blob.core.windows.net/membervideos"

DEFAULT_GENRE_SOURCE_URLS = [
    f"{MEMBER_VIDEOS_URL}/action.json",
    f"{MEMBER_VIDEOS_URL}/drama.json",
    f"{MEMBER_VIDEOS_URL}/thriller.json",
    f"{MEMBER_VIDEOS_URL}/scifi.json",
]

DEFAULT_ALL_MOVIES_URL = f"{MEMBER_VIDEOS_URL}/AllMovies.json"


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="MOVIES_",
        env_file=".env",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = "local"
    log_level: str = "info"

    # Upstream catalog sources
    genre_source_urls: List[str] = Field(default_factory=lambda: list(DEFAULT_GENRE_SOURCE_URLS))
    all_movies_url: str = DEFAULT_ALL_MOVIES_URL

    # Shared HTTP client
    http_timeout_seconds: float = 100.0
    http_max_connections: int = 100
    http_max_keepalive_connections: int = 20


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port, **overrides)
