"""Shared pytest fixtures for npm-start tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


class FakePathParser:
    """Records the path it was asked about and returns a fixed project path."""

    def __init__(self, project_path: str) -> None:
        self.project_path = project_path
        self.error: Exception | None = None
        self.calls: list[str] = []

    def get(self, path: str) -> str:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.project_path


@pytest.fixture
def working_dir(tmp_path: Path) -> Path:
    """Workspace root with a ``custom`` project subdirectory."""
    (tmp_path / "custom").mkdir()
    return tmp_path


@pytest.fixture
def project_dir(working_dir: Path) -> Path:
    return working_dir / "custom"


@pytest.fixture
def path_parser(project_dir: Path) -> FakePathParser:
    return FakePathParser(str(project_dir))


@pytest.fixture
def write_package_json(project_dir: Path):
    """Write a package.json with the given scripts into the project directory."""

    def _write(scripts: dict | None = None, **extra) -> Path:
        content = {"scripts": scripts or {}, **extra}
        manifest = project_dir / "package.json"
        manifest.write_text(json.dumps(content))
        return manifest

    return _write
