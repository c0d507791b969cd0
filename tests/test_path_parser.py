"""Tests for project path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from npm_start.exceptions import ErrorKind, ProjectPathError
from npm_start.path_parser import EnvProjectPathParser, ProjectPathParser


class TestEnvProjectPathParser:
    def test_satisfies_protocol(self):
        assert isinstance(EnvProjectPathParser({}), ProjectPathParser)

    def test_fake_satisfies_protocol(self, path_parser):
        assert isinstance(path_parser, ProjectPathParser)

    def test_unset_returns_root(self, tmp_path: Path):
        assert EnvProjectPathParser({}).get(str(tmp_path)) == str(tmp_path)

    def test_empty_returns_root(self, tmp_path: Path):
        parser = EnvProjectPathParser({"BP_NODE_PROJECT_PATH": ""})
        assert parser.get(str(tmp_path)) == str(tmp_path)

    def test_custom_subdirectory(self, tmp_path: Path):
        (tmp_path / "apps" / "web").mkdir(parents=True)
        parser = EnvProjectPathParser({"BP_NODE_PROJECT_PATH": "apps/web"})
        assert parser.get(str(tmp_path)) == str(tmp_path / "apps" / "web")

    def test_absolute_value_stays_under_root(self, tmp_path: Path):
        (tmp_path / "frontend").mkdir()
        parser = EnvProjectPathParser({"BP_NODE_PROJECT_PATH": "/frontend"})
        assert parser.get(str(tmp_path)) == str(tmp_path / "frontend")

    def test_absolute_value_missing_under_root(self, tmp_path: Path):
        parser = EnvProjectPathParser({"BP_NODE_PROJECT_PATH": "/frontend"})
        with pytest.raises(ProjectPathError) as exc_info:
            parser.get(str(tmp_path))
        assert str(tmp_path / "frontend") in str(exc_info.value)

    def test_missing_subdirectory(self, tmp_path: Path):
        parser = EnvProjectPathParser({"BP_NODE_PROJECT_PATH": "nope"})
        with pytest.raises(ProjectPathError) as exc_info:
            parser.get(str(tmp_path))
        assert "BP_NODE_PROJECT_PATH" in str(exc_info.value)
        assert "to be an existing directory" in str(exc_info.value)
        assert exc_info.value.kind is ErrorKind.RESOLUTION_FAILED

    def test_subdirectory_is_a_file(self, tmp_path: Path):
        (tmp_path / "app").write_text("")
        parser = EnvProjectPathParser({"BP_NODE_PROJECT_PATH": "app"})
        with pytest.raises(ProjectPathError):
            parser.get(str(tmp_path))
