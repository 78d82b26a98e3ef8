"""Output subsystem: compiled-name derivation and artifact renaming."""

from litmark.output.naming import DEFAULT_SUFFIX, compiled_name, is_compiled
from litmark.output.renamer import output_path_for, rename_artifact

__all__ = [
    "DEFAULT_SUFFIX",
    "compiled_name",
    "is_compiled",
    "output_path_for",
    "rename_artifact",
]
