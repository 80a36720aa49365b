"""Load and save the .devenvrc.json project configuration."""

import logging
from pathlib import Path

import aiofiles
from pydantic import ValidationError

from dockstrap import probe
from dockstrap.exceptions import ConfigError, FileProbeError
from dockstrap.models.config import ProjectConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = ".devenvrc.json"


def config_path(project_root: Path) -> Path:
    """Get the path to a project's .devenvrc.json."""
    return project_root / CONFIG_FILE


async def load_project_config(project_root: Path) -> ProjectConfig | None:
    """Load project configuration.

    Args:
        project_root: Path to the project directory.

    Returns:
        ProjectConfig, or None if the project has no .devenvrc.json.

    Raises:
        ConfigError: If the file exists but cannot be read or is invalid.
    """
    path = config_path(project_root)
    if not await probe.exists(path):
        return None

    try:
        config = ProjectConfig.model_validate_json(await probe.read_text(path))
    except (FileProbeError, ValidationError) as e:
        raise ConfigError(f"Failed to load configuration: {e}") from e

    logger.debug("Loaded project configuration from %s", path)
    return config


async def save_project_config(project_root: Path, config: ProjectConfig) -> Path:
    """Write project configuration to .devenvrc.json.

    Raises:
        ConfigError: If the file cannot be written.
    """
    path = config_path(project_root)
    content = config.model_dump_json(by_alias=True, exclude_none=True, indent=2)
    try:
        async with aiofiles.open(path, "w") as f:
            await f.write(content + "\n")
    except OSError as e:
        raise ConfigError(f"Failed to save configuration: {e}") from e
    return path
