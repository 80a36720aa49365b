"""Docker artifact generators."""

from dockstrap.generators.compose import render_compose
from dockstrap.generators.dockerfile import render_dockerfile
from dockstrap.generators.writer import write_artifacts

__all__ = ["render_compose", "render_dockerfile", "write_artifacts"]
