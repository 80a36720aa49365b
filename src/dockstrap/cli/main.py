"""Command-line interface for dockstrap."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from dockstrap.analyzers import (
    analyze_express,
    detect_frameworks,
    infer_service_variables,
    load_example_variables,
    scan,
)
from dockstrap.config import load_project_config, save_project_config
from dockstrap.exceptions import DockstrapError, EnvironmentAnalysisError
from dockstrap.generators import render_compose, render_dockerfile, write_artifacts
from dockstrap.models.analysis import FrameworkAnalysis, FrameworkInfo, ProjectAnalysis
from dockstrap.models.config import ProjectConfig
from dockstrap.models.docker import DockerOptions, Mode
from dockstrap.settings import get_settings

console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
        ],
    )


app = typer.Typer(
    name="dockstrap",
    help="Scan Node.js projects and generate Docker configuration.",
)

ProjectPath = Annotated[
    Path,
    typer.Argument(help="Path to the project directory. Defaults to current directory."),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")]
PortOption = Annotated[int | None, typer.Option("--port", "-p", help="Override port number.")]
NodeVersionOption = Annotated[str | None, typer.Option("--node-version", help="Node.js image tag.")]
VolumeOption = Annotated[
    list[str] | None,
    typer.Option("--volume", help="Extra volume mount (source:target). Repeatable."),
]

OPTION_ERRORS = {
    "port": "Invalid port number. Must be between 1 and 65535",
    "volumes": "Invalid volume mount syntax. Use format: source:target",
}


def _validate_project_path(path: Path) -> Path:
    if not path.exists():
        raise typer.BadParameter(f"Path does not exist: {path}")
    if not path.is_dir():
        raise typer.BadParameter(f"Path is not a directory: {path}")
    return path.resolve()


def _option_error(e: ValidationError) -> typer.BadParameter:
    """Turn a model validation error into a usage error for the offending option."""
    field = e.errors()[0]["loc"][0]
    return typer.BadParameter(OPTION_ERRORS.get(str(field), str(e)))


def _run(coro, action: str):
    """Run a coroutine, turning dockstrap errors into a clean exit."""
    try:
        return asyncio.run(coro)
    except DockstrapError as e:
        console.print(f"[red]✗ {action} failed:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


def _print_scan(result: ProjectAnalysis) -> None:
    console.print(f"\n[bold]Project:[/bold] {escape(str(result.project_root))}")
    console.print(f"  Type: {result.project_type}")
    console.print(f"  package.json: {'yes' if result.has_manifest else 'no'}")
    console.print(
        f"  Dependencies: {len(result.dependencies.dependencies)} "
        f"(+{len(result.dependencies.dev_dependencies)} dev)"
    )

    env = result.environment
    console.print(f"  .env: {'yes' if env.has_file else 'no'} ({len(env.variables)} variables)")
    if env.services:
        table = Table(title="Services")
        table.add_column("Service")
        table.add_column("URL")
        table.add_column("Required")
        for service in env.services:
            table.add_row(
                escape(service.name),
                escape(service.url or ""),
                "yes" if service.required else "no",
            )
        console.print(table)


def _print_express(result: FrameworkAnalysis) -> None:
    console.print("\n[bold]Express.js Project Analysis[/bold]")
    console.print(f"  Express Version: {result.version or 'Not detected'}")
    console.print(f"  Main File: {result.main_file}")
    console.print(f"  Port: {result.port or 'Not detected'}")
    console.print(f"  TypeScript: {'Yes' if result.uses_typescript else 'No'}")
    middleware = ", ".join(result.middleware) if result.middleware else "None detected"
    console.print(f"  Middleware: {middleware}")


@app.command("scan")
def scan_command(
    project_path: ProjectPath = Path("."),
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Scan a project directory for type, dependencies and environment."""
    _setup_logging(verbose)
    project_path = _validate_project_path(project_path)

    result = _run(scan(project_path), "Scan")
    if as_json:
        console.print_json(result.model_dump_json())
    else:
        _print_scan(result)


def _print_frameworks(frameworks: list[FrameworkInfo]) -> None:
    if not frameworks:
        console.print("No supported frameworks detected")
        return
    table = Table(title="Frameworks")
    table.add_column("Framework")
    table.add_column("Version")
    table.add_column("Type")
    for framework in frameworks:
        table.add_row(escape(framework.name), escape(framework.version), str(framework.kind))
    console.print(table)


@app.command("analyze")
def analyze_command(
    project_path: ProjectPath = Path("."),
    framework: Annotated[
        bool, typer.Option("--framework", help="List detected web frameworks.")
    ] = False,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Analyze an Express.js project."""
    _setup_logging(verbose)
    project_path = _validate_project_path(project_path)

    if framework:
        frameworks = _run(detect_frameworks(project_path), "Framework detection")
        if as_json:
            console.print_json(data=[f.model_dump(mode="json") for f in frameworks])
        else:
            _print_frameworks(frameworks)
        return

    result = _run(analyze_express(project_path), "Analysis")
    if as_json:
        console.print_json(result.model_dump_json())
    else:
        _print_express(result)


async def _service_variables(project_path: Path):
    try:
        return infer_service_variables(await load_example_variables(project_path))
    except EnvironmentAnalysisError as e:
        logger.warning("Skipping service containers: %s", e)
        return []


async def _generate(
    project_path: Path,
    options: DockerOptions,
    include_optional: bool,
) -> dict[str, str]:
    info = await analyze_express(project_path)
    if not info.detected:
        logger.warning(
            "Express not found in package.json, generating a generic Node.js configuration"
        )
    service_variables = await _service_variables(project_path)

    settings = get_settings()
    return {
        settings.dockerfile_name: render_dockerfile(info, options),
        settings.compose_file_name: render_compose(
            info, options, service_variables, include_optional
        ),
    }


@app.command("generate")
def generate_command(
    project_path: ProjectPath = Path("."),
    dev: Annotated[
        bool | None,
        typer.Option(
            "--dev/--prod",
            "-d",
            help="Generate development or production configuration. Defaults to .devenvrc.json mode.",
        ),
    ] = None,
    port: PortOption = None,
    node_version: NodeVersionOption = None,
    volume: VolumeOption = None,
    skip_optional: Annotated[
        bool, typer.Option("--skip-optional", help="Omit containers for optional services.")
    ] = False,
    force: Annotated[bool, typer.Option("--force", help="Overwrite existing files.")] = False,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Print files instead of writing them.")
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Analyze a project and generate Dockerfile and docker-compose.yml.

    Values saved in .devenvrc.json are used unless overridden on the command line.
    """
    _setup_logging(verbose)
    project_path = _validate_project_path(project_path)

    config = _run(load_project_config(project_path), "Generation") or ProjectConfig()
    try:
        options = config.docker_options(
            port=port,
            development=dev,
            node_version=node_version,
            volumes=[*config.volumes, *volume] if volume else None,
        )
    except ValidationError as e:
        raise _option_error(e) from e

    artifacts = _run(_generate(project_path, options, not skip_optional), "Generation")

    if dry_run:
        for name, content in artifacts.items():
            console.print(f"[bold]# {name}[/bold]")
            console.print(content, markup=False, highlight=False, soft_wrap=True)
        return

    written = _run(write_artifacts(project_path, artifacts, force=force), "Generation")
    console.print("[green]✓ Generated Docker configuration files:[/green]")
    for path in written:
        console.print(f"  - {path.name}")


@app.command("config")
def config_command(
    project_path: ProjectPath = Path("."),
    mode: Annotated[Mode | None, typer.Option("--mode", help="Default environment mode.")] = None,
    port: PortOption = None,
    node_version: NodeVersionOption = None,
    volume: VolumeOption = None,
    network: Annotated[
        list[str] | None, typer.Option("--network", help="Compose network to join. Repeatable.")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Save generation defaults to .devenvrc.json.

    Options not given keep their current saved value.
    """
    _setup_logging(verbose)
    project_path = _validate_project_path(project_path)

    existing = _run(load_project_config(project_path), "Configuration") or ProjectConfig()
    updates = {
        "mode": mode,
        "port": port,
        "node_version": node_version,
        "volumes": volume or None,
        "networks": network or None,
    }
    try:
        config = ProjectConfig(
            **{
                **existing.model_dump(),
                **{key: value for key, value in updates.items() if value is not None},
            }
        )
    except ValidationError as e:
        raise _option_error(e) from e

    path = _run(save_project_config(project_path, config), "Configuration")
    console.print(f"[green]✓ Saved {path.name}[/green]")

if __name__ == "__main__":
    app()
