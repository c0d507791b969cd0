"""Data models for the package.json manifest and the detection build plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field, field_validator

from npm_start.exceptions import ErrorKind


class PackageScripts(BaseModel):
    """The ``scripts`` block of package.json; only the start lifecycle is modeled."""

    start: str | None = None
    prestart: str | None = None
    poststart: str | None = None


class PackageJson(BaseModel):
    """Subset of package.json consulted during detection. Unknown keys are ignored."""

    scripts: PackageScripts = Field(default_factory=PackageScripts)

    @field_validator("scripts", mode="before")
    @classmethod
    def _null_scripts(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def has_start_script(self) -> bool:
        return bool(self.scripts.start)


@dataclass(frozen=True)
class BuildPlanRequirement:
    """A dependency the build phase must provide."""

    name: str  # e.g. "node" | "npm" | "node_modules" | "watchexec"
    metadata: dict[str, Any] = field(default_factory=dict)  # {"launch": True}

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "metadata": dict(self.metadata)}


@dataclass
class BuildPlan:
    """Ordered requirements produced by a passing detection."""

    requires: list[BuildPlanRequirement] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"requires": [req.to_dict() for req in self.requires]}


@dataclass
class DetectContext:
    """What the buildpack harness hands to detection."""

    working_dir: str


@dataclass
class DetectResult:
    """Outcome of one detection call. ``plan`` is None when undetected."""

    plan: BuildPlan | None = None

    @property
    def detected(self) -> bool:
        return self.plan is not None

    @property
    def kind(self) -> ErrorKind | None:
        """ErrorKind.UNDETECTED for the soft-fail outcome, None when a plan exists."""
        return None if self.detected else ErrorKind.UNDETECTED

    @classmethod
    def undetected(cls) -> DetectResult:
        return cls(plan=None)
