"""Express.js-specific project analysis."""

import logging
import re
from pathlib import Path

from dockstrap import probe
from dockstrap.analyzers.environment import ENV_FILE
from dockstrap.analyzers.manifest import read_manifest
from dockstrap.exceptions import DockstrapError, FileProbeError, FrameworkAnalysisError
from dockstrap.models.analysis import FrameworkAnalysis

logger = logging.getLogger(__name__)

DEFAULT_MAIN_FILE = "index.js"
TYPESCRIPT_PACKAGE = "typescript"

KNOWN_MIDDLEWARE = [
    "body-parser",
    "cors",
    "helmet",
    "morgan",
    "compression",
    "express-session",
]

ENV_PORT_PATTERN = re.compile(r"^\s*PORT\s*=\s*(\d+)", re.MULTILINE)
LISTEN_PORT_PATTERN = re.compile(r"\.listen\(\s*(\d+)")


async def _search_file(path: Path, pattern: re.Pattern[str]) -> int | None:
    """Return the first integer captured by pattern in a file, or None."""
    try:
        content = await probe.read_text(path)
    except FileProbeError as e:
        logger.debug("Skipping port search in %s: %s", path, e)
        return None

    match = pattern.search(content)
    return int(match.group(1)) if match else None


async def detect_port(project_root: Path, main_file: str) -> int | None:
    """Infer the listening port.

    ``PORT=<n>`` in ``.env`` wins over a ``.listen(<n>`` call in the main file.
    """
    port = await _search_file(project_root / ENV_FILE, ENV_PORT_PATTERN)
    if port is not None:
        return port
    return await _search_file(project_root / main_file, LISTEN_PORT_PATTERN)


def detect_middleware(dependencies: dict[str, str]) -> list[str]:
    """Known middleware packages present in dependencies, in a fixed order."""
    return [name for name in KNOWN_MIDDLEWARE if name in dependencies]


async def analyze_express(project_root: Path | str) -> FrameworkAnalysis:
    """Analyze an Express.js project.

    Args:
        project_root: Path to the project directory.

    Returns:
        FrameworkAnalysis with version, entry file, port and middleware.

    Raises:
        FrameworkAnalysisError: If package.json cannot be read or parsed.
    """
    project_root = Path(project_root).resolve()

    try:
        manifest = await read_manifest(project_root)
    except DockstrapError as e:
        raise FrameworkAnalysisError(f"Express analysis failed: {e}") from e

    dependencies = manifest.all_dependencies
    version = dependencies.get("express")
    main_file = manifest.main or DEFAULT_MAIN_FILE

    return FrameworkAnalysis(
        detected=version is not None,
        version=version,
        main_file=main_file,
        port=await detect_port(project_root, main_file),
        middleware=detect_middleware(dependencies),
        uses_typescript=TYPESCRIPT_PACKAGE in dependencies,
    )
