"""Read-only file probes with classified failures."""

import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from dockstrap.exceptions import (
    FileNotFoundProbeError,
    PermissionDeniedError,
    ReadFailureError,
)

logger = logging.getLogger(__name__)


async def exists(path: Path) -> bool:
    """Check whether a path exists. Never raises; unreadable means absent."""
    try:
        return await aiofiles.os.path.exists(path)
    except (OSError, ValueError):
        return False


async def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file.

    Args:
        path: File to read.
        encoding: Text encoding.

    Returns:
        File contents.

    Raises:
        FileNotFoundProbeError: If the path does not exist.
        PermissionDeniedError: If the file cannot be opened for reading.
        ReadFailureError: On any other read or decode failure.
    """
    try:
        async with aiofiles.open(path, encoding=encoding) as f:
            return await f.read()
    except FileNotFoundError as e:
        raise FileNotFoundProbeError(path) from e
    except PermissionError as e:
        raise PermissionDeniedError(path) from e
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s: %s", path, e)
        raise ReadFailureError(path) from e
