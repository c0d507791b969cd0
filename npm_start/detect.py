"""npm-start detection — pass when package.json declares a start script.

A passing detection requires node, npm and node_modules at launch, plus
watchexec when live reload is enabled.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import structlog
from pydantic import ValidationError

from npm_start.config import LIVE_RELOAD_ENV, live_reload_enabled
from npm_start.exceptions import (
    ManifestMalformedError,
    ManifestUnreadableError,
    NoStartScriptError,
)
from npm_start.models import (
    BuildPlan,
    BuildPlanRequirement,
    DetectContext,
    DetectResult,
    PackageJson,
)
from npm_start.path_parser import ProjectPathParser

log = structlog.get_logger("npm_start.detect")

MANIFEST_NAME = "package.json"

# Ordered; all are needed when the app is launched with `npm start`.
LAUNCH_REQUIREMENTS: tuple[str, ...] = ("node", "npm", "node_modules")
LIVE_RELOAD_REQUIREMENT = "watchexec"


def _launch(name: str) -> BuildPlanRequirement:
    return BuildPlanRequirement(name=name, metadata={"launch": True})


class NpmStartDetector:
    """Decide whether a workspace is an npm-start application.

    The project path parser maps the workspace root to the directory holding
    package.json. ``environ`` defaults to the process environment.
    """

    def __init__(
        self,
        project_path_parser: ProjectPathParser,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._project_path_parser = project_path_parser
        self._environ = os.environ if environ is None else environ

    def detect(self, context: DetectContext) -> DetectResult:
        """
        Run detection for one workspace.

        Args:
            context: Carries the workspace root.

        Returns:
            DetectResult with a plan, or the undetected outcome when there is
            no package.json.

        Raises:
            ManifestUnreadableError, ManifestMalformedError, NoStartScriptError,
            InvalidToggleError, or whatever the project path parser raises.
        """
        live_reload_raw = self._environ.get(LIVE_RELOAD_ENV)

        # Resolver errors pass through untouched
        project_path = self._project_path_parser.get(context.working_dir)

        manifest = self._load_manifest(Path(project_path))
        if manifest is None:
            log.debug("detect.undetected", project_path=project_path)
            return DetectResult.undetected()

        if not manifest.has_start_script:
            raise NoStartScriptError()

        requires = [_launch(name) for name in LAUNCH_REQUIREMENTS]

        # Checked only once the start script decision has passed
        if live_reload_enabled(live_reload_raw):
            requires.append(_launch(LIVE_RELOAD_REQUIREMENT))

        log.info(
            "detect.passed",
            project_path=project_path,
            requires=[req.name for req in requires],
        )
        return DetectResult(plan=BuildPlan(requires=requires))

    def _load_manifest(self, project_path: Path) -> PackageJson | None:
        """Read and parse package.json. Returns None when the file does not exist."""
        manifest_path = project_path / MANIFEST_NAME

        try:
            manifest_path.stat()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ManifestUnreadableError(f"failed to stat {MANIFEST_NAME}: {e}", e) from e

        try:
            content = manifest_path.read_bytes()
        except OSError as e:
            raise ManifestUnreadableError(f"failed to read {MANIFEST_NAME}: {e}", e) from e

        try:
            return PackageJson.model_validate_json(content)
        except ValidationError as e:
            raise ManifestMalformedError(f"failed to parse {MANIFEST_NAME}: {e}", e) from e
