"""Tests for framework detection."""

import pytest

from dockstrap.analyzers.frameworks import detect_frameworks, match_frameworks
from dockstrap.exceptions import FrameworkAnalysisError
from dockstrap.models.analysis import FrameworkInfo, FrameworkKind


class TestMatchFrameworks:
    """Test match_frameworks function."""

    @pytest.mark.parametrize(
        "package,name,kind",
        [
            ("express", "Express", FrameworkKind.BACKEND),
            ("@nestjs/core", "NestJS", FrameworkKind.BACKEND),
            ("next", "Next.js", FrameworkKind.FULLSTACK),
            ("@angular/core", "Angular", FrameworkKind.FRONTEND),
        ],
    )
    def test_known_frameworks(self, package, name, kind):
        """Each supported package maps to its framework and kind."""
        assert match_frameworks({package: "^1.0.0"}) == [
            FrameworkInfo(name=name, version="^1.0.0", kind=kind)
        ]

    def test_several_frameworks(self):
        """Projects can declare more than one framework."""
        frameworks = match_frameworks({"next": "14.1.0", "express": "^4.18.2", "react": "^18"})
        assert [f.name for f in frameworks] == ["Express", "Next.js"]

    def test_none(self):
        """Unrelated packages give an empty list."""
        assert match_frameworks({"lodash": "^4"}) == []


class TestDetectFrameworks:
    """Test detect_frameworks function."""

    @pytest.mark.asyncio
    async def test_reads_dependencies_and_dev_dependencies(self, make_project):
        """Both dependency sections are checked."""
        project = make_project(
            manifest={
                "dependencies": {"@nestjs/core": "^10.0.0"},
                "devDependencies": {"@angular/core": "^17.0.0"},
            }
        )

        frameworks = await detect_frameworks(project)

        assert frameworks == [
            FrameworkInfo(name="NestJS", version="^10.0.0", kind=FrameworkKind.BACKEND),
            FrameworkInfo(name="Angular", version="^17.0.0", kind=FrameworkKind.FRONTEND),
        ]

    @pytest.mark.asyncio
    async def test_missing_manifest_raises(self, tmp_path):
        """Without package.json detection fails."""
        with pytest.raises(FrameworkAnalysisError, match="Framework detection failed"):
            await detect_frameworks(tmp_path)

    @pytest.mark.asyncio
    async def test_invalid_manifest_raises(self, make_project):
        """A broken package.json is reported with its parse error."""
        project = make_project(manifest="{ nope")
        with pytest.raises(FrameworkAnalysisError, match="Failed to parse package.json"):
            await detect_frameworks(project)
