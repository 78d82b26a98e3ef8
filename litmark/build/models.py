"""Pydantic models for build results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class BuildResult(BaseModel):
    """Outcome of compiling one document."""

    source_path: Path
    artifact_path: Path
    output_path: Path
    duration_ms: int = 0
    dry_run: bool = False


class BuildFailure(BaseModel):
    source: str
    error: str
    error_type: str


class BuildReport(BaseModel):
    """Outcome of a multi-document build."""

    succeeded: list[BuildResult] = Field(default_factory=list)
    failed: list[BuildFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed
