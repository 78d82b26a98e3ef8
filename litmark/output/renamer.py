"""Moves a compiled artifact next to its source under the compiled name."""

from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path
from typing import Literal

from litmark.errors import (
    ArtifactExistsError,
    ArtifactMissingError,
    TargetDirectoryError,
)
from litmark.output.naming import DEFAULT_SUFFIX, compiled_name

logger = logging.getLogger(__name__)

ConflictPolicy = Literal["overwrite", "fail"]


def output_path_for(artifact: Path, target_dir: Path, suffix: str = DEFAULT_SUFFIX) -> Path:
    """Return where ``artifact`` ends up inside ``target_dir``."""
    return Path(target_dir) / compiled_name(Path(artifact).name, suffix)


def rename_artifact(
    artifact: str | Path,
    target_dir: str | Path,
    *,
    suffix: str = DEFAULT_SUFFIX,
    on_conflict: ConflictPolicy = "overwrite",
) -> Path:
    """Move ``artifact`` into ``target_dir`` with its extension replaced by ``suffix``.

    With ``on_conflict="overwrite"`` an existing destination is replaced
    atomically (``os.replace``), regardless of platform. With ``"fail"`` an
    existing destination raises :class:`ArtifactExistsError` and neither file
    is touched.

    Returns the new path.
    """
    artifact = Path(artifact)
    target_dir = Path(target_dir)

    if not artifact.is_file():
        raise ArtifactMissingError(f"Compiled artifact not found: {artifact}", artifact)
    if not target_dir.is_dir():
        raise TargetDirectoryError(f"Target directory does not exist: {target_dir}", target_dir)
    if not os.access(target_dir, os.W_OK | os.X_OK):
        raise TargetDirectoryError(f"Target directory is not writable: {target_dir}", target_dir)

    dest = output_path_for(artifact, target_dir, suffix)

    if dest.exists():
        if dest.resolve() == artifact.resolve():
            logger.debug("artifact already at %s", dest)
            return dest
        if on_conflict == "fail":
            raise ArtifactExistsError(f"Output already exists: {dest}", dest)
        logger.debug("overwriting existing %s", dest)

    try:
        os.replace(artifact, dest)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise TargetDirectoryError(f"Cannot move {artifact} to {dest}: {e}", dest) from e
        # Artifact lives on another filesystem
        try:
            shutil.move(str(artifact), str(dest))
        except OSError as move_err:
            raise TargetDirectoryError(
                f"Cannot move {artifact} to {dest}: {move_err}", dest
            ) from move_err

    logger.info("moved %s -> %s", artifact, dest)
    return dest
