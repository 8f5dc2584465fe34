"""Shared pytest fixtures for the node-backend-gen test suite.

Provides reusable fixtures for:
- An isolated working directory
- A small hand-built template descriptor
- Generator and option objects
- Helpers to snapshot a directory tree
"""

from __future__ import annotations

from pathlib import Path

import pytest

from node_backend_gen.scaffolder.generator import ProjectGenerator, ProjectOptions
from node_backend_gen.scaffolder.templates import TemplateDescriptor, generated, literal


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

_ENV_VARS = ("NBG_DEFAULT_TEMPLATE", "NBG_INCLUDE_DOCKER", "NBG_OUTPUT_DIR", "NBG_QUIET")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure developer settings never leak into a test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty current working directory (auto-cleanup)."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


# ---------------------------------------------------------------------------
# Templates & generator
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_descriptor() -> TemplateDescriptor:
    """A tiny template: one literal, two generated files, one undeclared folder."""
    return TemplateDescriptor(
        name="Sample",
        folders=("src", "src/routes"),
        files={
            "src/index.js": literal("console.log('hi');"),
            "package.json": generated('{\n    "name": "{{ project_name }}"\n}'),
            "docs/guide/README.md": generated("# {{ project_name }}\n"),
        },
    )


@pytest.fixture
def generator() -> ProjectGenerator:
    return ProjectGenerator()


@pytest.fixture
def quiet() -> ProjectOptions:
    return ProjectOptions(quiet=True)


# ---------------------------------------------------------------------------
# Tree inspection helpers
# ---------------------------------------------------------------------------


class TreeInspector:
    """Helpers to list and snapshot a directory tree."""

    @staticmethod
    def dirs(root: Path) -> set[str]:
        """Every directory below *root*, as forward-slash relative paths."""
        return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_dir()}

    @staticmethod
    def files(root: Path) -> set[str]:
        """Every regular file below *root*, as forward-slash relative paths."""
        return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}

    @staticmethod
    def snapshot(root: Path) -> dict[str, tuple[bool, int]]:
        """Map each path below *root* to ``(is_dir, mtime_ns)``."""
        return {
            p.relative_to(root).as_posix(): (p.is_dir(), p.stat().st_mtime_ns)
            for p in root.rglob("*")
        }


@pytest.fixture
def tree() -> TreeInspector:
    return TreeInspector()
