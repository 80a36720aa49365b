"""Pydantic models for dockstrap."""

from dockstrap.models.analysis import (
    DependencyInfo,
    EnvironmentConfiguration,
    FrameworkAnalysis,
    FrameworkInfo,
    FrameworkKind,
    ManifestInfo,
    ProjectAnalysis,
    ProjectType,
    ServiceDescriptor,
)
from dockstrap.models.config import ProjectConfig
from dockstrap.models.docker import DockerOptions, Mode

__all__ = [
    "DependencyInfo",
    "DockerOptions",
    "EnvironmentConfiguration",
    "FrameworkAnalysis",
    "FrameworkInfo",
    "FrameworkKind",
    "ManifestInfo",
    "Mode",
    "ProjectAnalysis",
    "ProjectConfig",
    "ProjectType",
    "ServiceDescriptor",
]
