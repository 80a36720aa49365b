"""package.json reader."""

import logging
from pathlib import Path

from pydantic import ValidationError

from dockstrap import probe
from dockstrap.exceptions import ManifestParseError
from dockstrap.models.analysis import ManifestInfo

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"


def manifest_path(project_root: Path) -> Path:
    """Get the path to a project's package.json."""
    return project_root / MANIFEST_FILE


def parse_manifest(content: str) -> ManifestInfo:
    """Parse package.json text.

    Raises:
        ManifestParseError: If the text is not a JSON object with
            string-to-string dependency sections.
    """
    try:
        return ManifestInfo.model_validate_json(content)
    except ValidationError as e:
        raise ManifestParseError(f"Failed to parse {MANIFEST_FILE}: {e}") from e


async def read_manifest(project_root: Path) -> ManifestInfo:
    """Read and parse a project's package.json.

    Args:
        project_root: Path to the project directory.

    Returns:
        Parsed manifest. Missing dependency sections default to empty.

    Raises:
        FileProbeError: If package.json cannot be read.
        ManifestParseError: If package.json is malformed.
    """
    path = manifest_path(project_root)
    content = await probe.read_text(path)
    manifest = parse_manifest(content)
    logger.debug(
        "Read %s: %d dependencies, %d devDependencies",
        path,
        len(manifest.dependencies),
        len(manifest.dev_dependencies),
    )
    return manifest
