"""Exception hierarchy for dockstrap."""

from pathlib import Path


class DockstrapError(Exception):
    """Base exception for all dockstrap errors."""


class FileProbeError(DockstrapError):
    """Failed to read a file from the project directory."""

    reason = "Failed to read file"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.reason} (path: {self.path})")


class FileNotFoundProbeError(FileProbeError):
    """File does not exist."""

    reason = "File not found"


class PermissionDeniedError(FileProbeError):
    """File exists but cannot be read."""

    reason = "Permission denied"


class ReadFailureError(FileProbeError):
    """File could not be read for any other reason."""


class ManifestParseError(DockstrapError):
    """package.json exists but is not a valid manifest."""


class AnalyzeError(DockstrapError):
    """Failed to analyze project."""


class EnvironmentAnalysisError(AnalyzeError):
    """Failed to analyze environment files."""


class FrameworkAnalysisError(AnalyzeError):
    """Failed to analyze framework usage."""


class GenerateError(DockstrapError):
    """Failed to generate or write Docker configuration."""


class ConfigError(DockstrapError):
    """Failed to load or save project configuration."""
