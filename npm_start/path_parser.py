"""Project path resolution — map a workspace root to the directory holding package.json."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from npm_start.config import PROJECT_PATH_ENV
from npm_start.exceptions import ProjectPathError

log = structlog.get_logger("npm_start.path_parser")


@runtime_checkable
class ProjectPathParser(Protocol):
    """Interface every project path resolver must satisfy.

    ``get`` returns the project directory for a workspace root, or raises.
    """

    def get(self, path: str) -> str: ...


class EnvProjectPathParser:
    """Resolve the project directory from BP_NODE_PROJECT_PATH.

    With the variable unset the workspace root is the project directory.
    Otherwise it names a subdirectory of the root (monorepo layouts), which
    must already exist.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, path: str) -> str:
        custom = self._environ.get(PROJECT_PATH_ENV, "")
        if not custom:
            return path

        # Always relative to the workspace root, even when given as "/frontend"
        project_path = Path(path) / custom.lstrip("/")
        if not project_path.is_dir():
            raise ProjectPathError(
                f"expected value derived from {PROJECT_PATH_ENV} [{project_path}] "
                "to be an existing directory"
            )
        log.debug("path_parser.custom_project_path", project_path=str(project_path))
        return str(project_path)
