"""Detect which web frameworks a project declares."""

from pathlib import Path

from dockstrap.analyzers.manifest import read_manifest
from dockstrap.exceptions import DockstrapError, FrameworkAnalysisError
from dockstrap.models.analysis import FrameworkInfo, FrameworkKind

# package name -> (display name, kind)
FRAMEWORKS: dict[str, tuple[str, FrameworkKind]] = {
    "express": ("Express", FrameworkKind.BACKEND),
    "@nestjs/core": ("NestJS", FrameworkKind.BACKEND),
    "next": ("Next.js", FrameworkKind.FULLSTACK),
    "@angular/core": ("Angular", FrameworkKind.FRONTEND),
}


def match_frameworks(dependencies: dict[str, str]) -> list[FrameworkInfo]:
    """Known frameworks present in dependencies, in FRAMEWORKS order."""
    return [
        FrameworkInfo(name=name, version=dependencies[package], kind=kind)
        for package, (name, kind) in FRAMEWORKS.items()
        if package in dependencies
    ]


async def detect_frameworks(project_root: Path | str) -> list[FrameworkInfo]:
    """Detect frameworks from package.json dependencies and devDependencies.

    Raises:
        FrameworkAnalysisError: If package.json cannot be read or parsed.
    """
    project_root = Path(project_root).resolve()
    try:
        manifest = await read_manifest(project_root)
    except DockstrapError as e:
        raise FrameworkAnalysisError(f"Framework detection failed: {e}") from e
    return match_frameworks(manifest.all_dependencies)
