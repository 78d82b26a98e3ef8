"""Build glue: compile then rename."""

from litmark.build.builder import DocumentBuilder
from litmark.build.models import BuildFailure, BuildReport, BuildResult

__all__ = [
    "BuildFailure",
    "BuildReport",
    "BuildResult",
    "DocumentBuilder",
]
