"""npm-start: detect Node.js applications launched with ``npm start``."""

__version__ = "0.1.0"

from npm_start.detect import NpmStartDetector
from npm_start.exceptions import (
    NO_START_SCRIPT_ERROR,
    ErrorKind,
    InvalidToggleError,
    ManifestMalformedError,
    ManifestUnreadableError,
    NoStartScriptError,
    NpmStartError,
    ProjectPathError,
)
from npm_start.models import (
    BuildPlan,
    BuildPlanRequirement,
    DetectContext,
    DetectResult,
    PackageJson,
    PackageScripts,
)
from npm_start.path_parser import EnvProjectPathParser, ProjectPathParser

__all__ = [
    "NO_START_SCRIPT_ERROR",
    "BuildPlan",
    "BuildPlanRequirement",
    "DetectContext",
    "DetectResult",
    "EnvProjectPathParser",
    "ErrorKind",
    "InvalidToggleError",
    "ManifestMalformedError",
    "ManifestUnreadableError",
    "NoStartScriptError",
    "NpmStartDetector",
    "NpmStartError",
    "PackageJson",
    "PackageScripts",
    "ProjectPathError",
    "ProjectPathParser",
]
