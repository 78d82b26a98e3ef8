"""Exception hierarchy for litmark builds."""

from __future__ import annotations

from pathlib import Path


class LitmarkError(Exception):
    """Base error for a failed build step. Carries the path it concerns."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class SourceNotFoundError(LitmarkError):
    """The requested source document does not exist."""


class CompilerError(LitmarkError):
    """The external compiler could not be run or exited non-zero."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message, path)


class ArtifactMissingError(LitmarkError):
    """The compiled artifact is not where it was expected."""


class ArtifactExistsError(LitmarkError):
    """The rename destination already exists and overwriting is disabled."""


class TargetDirectoryError(LitmarkError):
    """The rename destination directory is missing or not writable."""
