"""Static analyzers for Node.js projects."""

from dockstrap.analyzers.environment import analyze_environment, load_example_variables
from dockstrap.analyzers.express import analyze_express
from dockstrap.analyzers.frameworks import detect_frameworks
from dockstrap.analyzers.manifest import read_manifest
from dockstrap.analyzers.scanner import scan
from dockstrap.analyzers.services import infer_service_variables

__all__ = [
    "analyze_environment",
    "analyze_express",
    "detect_frameworks",
    "infer_service_variables",
    "load_example_variables",
    "read_manifest",
    "scan",
]
