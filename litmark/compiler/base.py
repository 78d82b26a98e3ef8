"""Abstract literate-document compiler interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from litmark.config.models import CompilerConfig


class DocCompiler(ABC):
    """Compiles a single literate document into a rendered artifact.

    The compiler itself is an external collaborator; adapters only promise
    that one source produces exactly one artifact inside ``target_dir``
    whose name is derived from the source name.
    """

    def __init__(self, config: CompilerConfig) -> None:
        self.config = config

    @property
    def target_dir(self) -> Path:
        return Path(self.config.target_dir).resolve()

    def artifact_path(self, source: Path) -> Path:
        """Where the artifact for ``source`` is expected to appear."""
        return self.target_dir / Path(source).name

    @abstractmethod
    def compile(self, source: Path) -> Path:
        """Compile ``source`` and return the path of the produced artifact."""
        ...
