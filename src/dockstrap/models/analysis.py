"""Pydantic models for project analysis."""

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ServiceDescriptor(BaseModel):
    """An external service implied by an environment variable."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str | None = None
    required: bool = True


class EnvironmentConfiguration(BaseModel):
    """Result of environment file analysis.

    ``variables`` comes from ``.env`` only; ``services`` from ``.env.example`` only.
    """

    model_config = ConfigDict(frozen=True)

    variables: dict[str, str] = {}
    has_file: bool = False
    services: list[ServiceDescriptor] = []


class ManifestInfo(BaseModel):
    """The parts of package.json dockstrap cares about."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str | None = None
    version: str | None = None
    main: str | None = None
    scripts: dict[str, str] = {}
    dependencies: dict[str, str] = {}
    dev_dependencies: dict[str, str] = Field(default={}, alias="devDependencies")

    @field_validator("scripts", "dependencies", "dev_dependencies", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return {} if value is None else value

    @property
    def all_dependencies(self) -> dict[str, str]:
        """Dependencies overlaid with devDependencies."""
        return {**self.dependencies, **self.dev_dependencies}


class DependencyInfo(BaseModel):
    """Declared dependencies of a project."""

    model_config = ConfigDict(frozen=True)

    dependencies: dict[str, str] = {}
    dev_dependencies: dict[str, str] = {}


class ProjectType(StrEnum):
    """Project classification derived from declared dependencies."""

    EXPRESS = "express"
    UNKNOWN = "unknown"


class ProjectAnalysis(BaseModel):
    """Result of scanning a project directory."""

    model_config = ConfigDict(frozen=True)

    project_type: ProjectType
    has_manifest: bool
    dependencies: DependencyInfo = DependencyInfo()
    project_root: Path
    environment: EnvironmentConfiguration = EnvironmentConfiguration()


class FrameworkAnalysis(BaseModel):
    """Result of Express-specific analysis."""

    model_config = ConfigDict(frozen=True)

    detected: bool = False
    version: str | None = None
    main_file: str
    port: int | None = None
    middleware: list[str] = []
    uses_typescript: bool = False


class FrameworkKind(StrEnum):
    """Where a framework runs."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"


class FrameworkInfo(BaseModel):
    """A web framework declared in package.json."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    kind: FrameworkKind
