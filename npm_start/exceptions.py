"""Custom exceptions for npm-start detection."""

from __future__ import annotations

import enum

NO_START_SCRIPT_ERROR = "no start script in package.json"


class ErrorKind(str, enum.Enum):
    """Every way a detection call can end without a plan."""

    UNDETECTED = "undetected"
    RESOLUTION_FAILED = "resolution_failed"
    MANIFEST_UNREADABLE = "manifest_unreadable"
    MANIFEST_MALFORMED = "manifest_malformed"
    NO_START_SCRIPT = "no_start_script"
    INVALID_TOGGLE = "invalid_toggle"


class NpmStartError(Exception):
    """Base exception for all hard detection failures."""

    kind: ErrorKind

    def __init__(self, message: str, cause: BaseException | None = None):
        self.cause = cause
        super().__init__(message)


class ProjectPathError(NpmStartError):
    """Raised when the project directory cannot be derived from the workspace."""

    kind = ErrorKind.RESOLUTION_FAILED


class ManifestUnreadableError(NpmStartError):
    """Raised when package.json exists but cannot be stat'd or read."""

    kind = ErrorKind.MANIFEST_UNREADABLE


class ManifestMalformedError(NpmStartError):
    """Raised when package.json is not a valid manifest."""

    kind = ErrorKind.MANIFEST_MALFORMED


class NoStartScriptError(NpmStartError):
    """Raised when package.json declares no ``start`` script."""

    kind = ErrorKind.NO_START_SCRIPT

    def __init__(self) -> None:
        super().__init__(NO_START_SCRIPT_ERROR)


class InvalidToggleError(NpmStartError):
    """Raised when an environment toggle is not a boolean literal."""

    kind = ErrorKind.INVALID_TOGGLE

    def __init__(self, name: str, value: str, cause: BaseException):
        self.name = name
        self.value = value
        super().__init__(f"failed to parse {name} value {value}: {cause}", cause)
