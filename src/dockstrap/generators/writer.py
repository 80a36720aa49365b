"""Write generated artifacts into a project directory."""

import logging
from pathlib import Path

import aiofiles

from dockstrap import probe
from dockstrap.exceptions import GenerateError

logger = logging.getLogger(__name__)


async def write_artifacts(
    project_root: Path,
    artifacts: dict[str, str],
    force: bool = False,
) -> list[Path]:
    """Write artifact files to the project root.

    Args:
        project_root: Project directory.
        artifacts: File name to content.
        force: Overwrite existing files.

    Returns:
        Paths of written files.

    Raises:
        GenerateError: If a file exists and force is False, or a write fails.
    """
    paths = {name: project_root / name for name in artifacts}

    if not force:
        existing = [name for name, path in paths.items() if await probe.exists(path)]
        if existing:
            raise GenerateError(
                f"Refusing to overwrite existing files: {', '.join(existing)}. "
                "Use --force to replace them."
            )

    written = []
    for name, content in artifacts.items():
        path = paths[name]
        try:
            async with aiofiles.open(path, "w") as f:
                await f.write(content)
        except OSError as e:
            raise GenerateError(f"Failed to write {path}: {e}") from e
        logger.debug("Wrote %s", path)
        written.append(path)

    return written
