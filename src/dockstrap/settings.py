"""Application settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from DOCKSTRAP_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOCKSTRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    node_version: str = "18-alpine"
    default_port: int = 3000

    # Generated artifact names
    dockerfile_name: str = "Dockerfile"
    compose_file_name: str = "docker-compose.yml"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
