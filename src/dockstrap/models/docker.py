"""Pydantic models for Docker artifact generation."""

from enum import StrEnum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from dockstrap.settings import get_settings


def validate_volume(volume: str) -> str:
    """Check a bind mount is written as ``source:target``."""
    parts = volume.split(":")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Invalid volume mount syntax {volume!r}. Use format: source:target")
    return volume


Volume = Annotated[str, AfterValidator(validate_volume)]
Port = Annotated[int, Field(ge=1, le=65535)]


class Mode(StrEnum):
    """Container environment mode."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


def _default_node_version() -> str:
    return get_settings().node_version


class DockerOptions(BaseModel):
    """User overrides for generated Docker configuration.

    Unset ``port`` and ``typescript`` fall back to what analysis detected.
    ``volumes`` are mounted in addition to the source and node_modules mounts.
    """

    node_version: str = Field(default_factory=_default_node_version)
    port: Port | None = None
    typescript: bool | None = None
    development: bool = False
    volumes: list[Volume] = []
    networks: list[str] = []
