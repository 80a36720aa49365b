"""Project scanning: classify a directory and collect its configuration."""

import asyncio
import logging
from pathlib import Path

from dockstrap import probe
from dockstrap.analyzers.environment import analyze_environment
from dockstrap.analyzers.manifest import manifest_path, read_manifest
from dockstrap.models.analysis import (
    DependencyInfo,
    EnvironmentConfiguration,
    ManifestInfo,
    ProjectAnalysis,
    ProjectType,
)

logger = logging.getLogger(__name__)

FRAMEWORK_PACKAGE = "express"


async def _environment_or_default(project_root: Path) -> EnvironmentConfiguration:
    """Run environment analysis, degrading to an empty configuration on failure."""
    try:
        return await analyze_environment(project_root)
    except Exception as e:
        logger.warning("Environment analysis failed for %s: %s", project_root, e)
        return EnvironmentConfiguration()


def classify(manifest: ManifestInfo | None) -> ProjectType:
    """Classify a project by its runtime (not dev) dependencies."""
    if manifest is not None and FRAMEWORK_PACKAGE in manifest.dependencies:
        return ProjectType.EXPRESS
    return ProjectType.UNKNOWN


async def scan(path: Path | str) -> ProjectAnalysis:
    """Scan a directory to detect project type and configuration.

    The manifest read and environment analysis touch disjoint files and run
    concurrently. A broken package.json fails the scan and cancels the
    environment task; broken environment files only produce a warning and an
    empty environment block.

    Args:
        path: Path to the project root directory.

    Returns:
        ProjectAnalysis for the directory.

    Raises:
        FileProbeError: If package.json exists but cannot be read.
        ManifestParseError: If package.json is malformed.
    """
    project_root = Path(path).resolve()
    has_manifest = await probe.exists(manifest_path(project_root))

    logger.debug("Scanning %s", project_root)
    environment_task = asyncio.create_task(_environment_or_default(project_root))
    try:
        manifest = await read_manifest(project_root) if has_manifest else None
    except BaseException:
        environment_task.cancel()
        raise
    environment = await environment_task

    dependencies = DependencyInfo()
    if manifest is not None:
        dependencies = DependencyInfo(
            dependencies=manifest.dependencies,
            dev_dependencies=manifest.dev_dependencies,
        )

    return ProjectAnalysis(
        project_type=classify(manifest),
        has_manifest=has_manifest,
        dependencies=dependencies,
        project_root=project_root,
        environment=environment,
    )
