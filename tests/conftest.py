"""Shared test fixtures."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from dockstrap.models.analysis import FrameworkAnalysis, ServiceDescriptor
from dockstrap.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_project(tmp_path) -> Callable[..., Path]:
    """Factory that writes project files into tmp_path and returns it."""

    def _make(
        manifest: dict | str | None = None,
        env: str | None = None,
        env_example: str | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        if manifest is not None:
            content = manifest if isinstance(manifest, str) else json.dumps(manifest)
            (tmp_path / "package.json").write_text(content)
        if env is not None:
            (tmp_path / ".env").write_text(env)
        if env_example is not None:
            (tmp_path / ".env.example").write_text(env_example)
        for name, content in (files or {}).items():
            (tmp_path / name).write_text(content)
        return tmp_path

    return _make


@pytest.fixture
def express_manifest() -> dict:
    """A typical Express.js package.json."""
    return {
        "name": "demo-api",
        "version": "1.0.0",
        "main": "server.js",
        "scripts": {"start": "node server.js", "dev": "nodemon server.js"},
        "dependencies": {"express": "^4.17.1", "cors": "^2.8.5", "helmet": "^7.0.0"},
        "devDependencies": {"nodemon": "^3.0.0"},
    }


@pytest.fixture
def express_info() -> FrameworkAnalysis:
    """Express analysis with a detected port."""
    return FrameworkAnalysis(
        detected=True,
        version="^4.17.1",
        main_file="index.js",
        port=4000,
        middleware=["cors"],
        uses_typescript=False,
    )


@pytest.fixture
def backing_services() -> list[tuple[str, ServiceDescriptor]]:
    """(variable, service) pairs as inferred from a typical .env.example."""
    return [
        (
            "DATABASE_URL",
            ServiceDescriptor(name="Database", url="postgresql://localhost:5432/db", required=True),
        ),
        (
            "OPTIONAL_REDIS_URL",
            ServiceDescriptor(name="Redis", url="redis://localhost:6379", required=False),
        ),
    ]
