"""Compiler adapter that shells out to an external command."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from litmark.compiler.base import DocCompiler
from litmark.errors import ArtifactMissingError, CompilerError, TargetDirectoryError

logger = logging.getLogger(__name__)

_STDERR_LIMIT = 2000


class CommandCompiler(DocCompiler):
    """Runs the configured argv template once per document.

    Template placeholders: ``{source}``, ``{source_name}``, ``{source_dir}``
    and ``{target_dir}``. All paths are substituted as absolute paths.
    """

    def build_argv(self, source: Path) -> list[str]:
        source = Path(source).resolve()
        values = {
            "{source}": str(source),
            "{source_name}": source.name,
            "{source_dir}": str(source.parent),
            "{target_dir}": str(self.target_dir),
        }
        argv = []
        for part in self.config.command:
            for placeholder, value in values.items():
                part = part.replace(placeholder, value)
            argv.append(part)
        return argv

    def compile(self, source: Path) -> Path:
        source = Path(source).resolve()
        artifact = self.artifact_path(source)

        # The artifact keeps the source's name, so the compiler would write over it
        if artifact.resolve() == source:
            raise CompilerError(
                f"Compiler target_dir {self.target_dir} is the source directory; "
                f"the artifact would replace {source.name}",
                source,
            )

        try:
            self.target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TargetDirectoryError(
                f"Cannot create compiler target_dir {self.target_dir}: {e}", self.target_dir
            ) from e

        # A leftover from an earlier run must not pass for fresh output
        if artifact.exists():
            logger.debug("removing stale artifact %s", artifact)
            try:
                artifact.unlink()
            except OSError as e:
                raise CompilerError(
                    f"Cannot remove stale artifact {artifact}: {e}", artifact
                ) from e

        argv = self.build_argv(source)
        env = {**os.environ, **self.config.env}
        logger.debug("running compiler: %s", argv)

        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self.config.timeout,
                env=env,
            )
        except FileNotFoundError as e:
            raise CompilerError(
                f"Compiler executable not found: {argv[0]}", source
            ) from e
        except subprocess.TimeoutExpired as e:
            raise CompilerError(
                f"Compiler timed out after {self.config.timeout}s on {source.name}",
                source,
            ) from e

        if result.stdout:
            logger.debug("compiler stdout:\n%s", result.stdout)

        if result.returncode != 0:
            stderr = (result.stderr or "")[:_STDERR_LIMIT]
            raise CompilerError(
                f"Compiler exited {result.returncode} on {source.name}: {stderr.strip()}",
                source,
                returncode=result.returncode,
                stderr=stderr,
            )

        if not artifact.is_file():
            raise ArtifactMissingError(
                f"Compiler succeeded but produced no artifact at {artifact}", artifact
            )

        logger.info("compiled %s -> %s", source, artifact)
        return artifact
