"""Environment file analysis."""

import logging
from pathlib import Path

from dockstrap import probe
from dockstrap.analyzers.env_file import parse_env
from dockstrap.analyzers.services import infer_services
from dockstrap.exceptions import EnvironmentAnalysisError, FileProbeError
from dockstrap.models.analysis import EnvironmentConfiguration

logger = logging.getLogger(__name__)

ENV_FILE = ".env"
ENV_EXAMPLE_FILE = ".env.example"


async def _read_env_file(path: Path) -> dict[str, str] | None:
    """Parse an env file, or return None if it does not exist."""
    if not await probe.exists(path):
        return None
    try:
        variables = parse_env(await probe.read_text(path))
    except FileProbeError as e:
        raise EnvironmentAnalysisError(f"Environment analysis failed: {e}") from e
    logger.debug("Parsed %d variables from %s", len(variables), path)
    return variables


async def load_example_variables(project_root: Path) -> dict[str, str]:
    """Variables declared in ``.env.example``, empty if the file is missing.

    Raises:
        EnvironmentAnalysisError: If the file exists but cannot be read.
    """
    return await _read_env_file(project_root / ENV_EXAMPLE_FILE) or {}


async def analyze_environment(project_root: Path) -> EnvironmentConfiguration:
    """Analyze the environment files of a project.

    Variables come from ``.env``; services are inferred from ``.env.example``.
    A missing file is not an error.

    Args:
        project_root: Path to the project directory.

    Returns:
        EnvironmentConfiguration for the project.

    Raises:
        EnvironmentAnalysisError: If an existing file cannot be read.
    """
    variables = await _read_env_file(project_root / ENV_FILE)
    services = infer_services(await load_example_variables(project_root))

    return EnvironmentConfiguration(
        variables=variables or {},
        has_file=variables is not None,
        services=services,
    )
