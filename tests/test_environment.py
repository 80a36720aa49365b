"""Tests for environment analysis."""

from unittest.mock import patch

import pytest

from dockstrap.analyzers.environment import analyze_environment, load_example_variables
from dockstrap.exceptions import EnvironmentAnalysisError, PermissionDeniedError
from dockstrap.models.analysis import EnvironmentConfiguration, ServiceDescriptor


class TestAnalyzeEnvironment:
    """Test analyze_environment function."""

    @pytest.mark.asyncio
    async def test_parses_env_file(self, make_project):
        """Variables come from .env."""
        project = make_project(
            env="""
      DB_HOST=localhost
      DB_PORT=5432
      API_KEY=secret
      # Comment line
      EMPTY_VAR=
    """
        )

        result = await analyze_environment(project)

        assert result.has_file is True
        assert result.variables == {
            "DB_HOST": "localhost",
            "DB_PORT": "5432",
            "API_KEY": "secret",
            "EMPTY_VAR": "",
        }
        assert result.services == []

    @pytest.mark.asyncio
    async def test_services_from_example_file(self, make_project):
        """Services are inferred from .env.example only."""
        project = make_project(
            env_example="""
      DATABASE_URL=postgresql://localhost:5432/db
      REDIS_URL=redis://localhost:6379
      OPTIONAL_ELASTIC_URL=http://localhost:9200
    """
        )

        result = await analyze_environment(project)

        assert result.has_file is False
        assert result.variables == {}
        assert result.services == [
            ServiceDescriptor(name="Database", url="postgresql://localhost:5432/db"),
            ServiceDescriptor(name="Redis", url="redis://localhost:6379"),
            ServiceDescriptor(name="Elasticsearch", url="http://localhost:9200", required=False),
        ]

    @pytest.mark.asyncio
    async def test_projections_are_independent(self, make_project):
        """.env never feeds services and .env.example never feeds variables."""
        project = make_project(env="DATABASE_URL=pg://real", env_example="API_KEY=example")

        result = await analyze_environment(project)

        assert result.variables == {"DATABASE_URL": "pg://real"}
        assert result.services == []

    @pytest.mark.asyncio
    async def test_missing_files(self, tmp_path):
        """No env files yields the zero-value configuration."""
        result = await analyze_environment(tmp_path)
        assert result == EnvironmentConfiguration()

    @pytest.mark.asyncio
    async def test_unreadable_file_raises(self, make_project):
        """A read failure on an existing file is wrapped in EnvironmentAnalysisError."""
        project = make_project(env="PORT=3000")

        with patch(
            "dockstrap.probe.aiofiles.open",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            with pytest.raises(EnvironmentAnalysisError, match="Environment analysis failed") as e:
                await analyze_environment(project)

        assert isinstance(e.value.__cause__, PermissionDeniedError)

    @pytest.mark.asyncio
    async def test_example_directory_raises(self, make_project):
        """.env.example that is a directory is a read failure, not absence."""
        project = make_project(env="PORT=3000")
        (project / ".env.example").mkdir()

        with pytest.raises(EnvironmentAnalysisError):
            await analyze_environment(project)


class TestLoadExampleVariables:
    """Test load_example_variables function."""

    @pytest.mark.asyncio
    async def test_reads_example_file(self, make_project):
        """Variables come from .env.example, not .env."""
        project = make_project(
            env="REDIS_HOST=real", env_example="REDIS_HOST=localhost\nDB_HOST=db"
        )
        assert await load_example_variables(project) == {
            "REDIS_HOST": "localhost",
            "DB_HOST": "db",
        }

    @pytest.mark.asyncio
    async def test_missing_example_file(self, tmp_path):
        """No .env.example gives no variables."""
        assert await load_example_variables(tmp_path) == {}

    @pytest.mark.asyncio
    async def test_unreadable_example_raises(self, make_project):
        """A .env.example that cannot be read raises EnvironmentAnalysisError."""
        project = make_project()
        (project / ".env.example").mkdir()

        with pytest.raises(EnvironmentAnalysisError):
            await load_example_variables(project)
