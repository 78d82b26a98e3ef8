"""DocumentBuilder: compile a literate document, then rename the artifact."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from pathlib import Path

from litmark.build.models import BuildFailure, BuildReport, BuildResult
from litmark.compiler import DocCompiler, create_compiler
from litmark.config.models import LitmarkConfig
from litmark.errors import LitmarkError, SourceNotFoundError
from litmark.output import is_compiled, output_path_for, rename_artifact

logger = logging.getLogger(__name__)


class DocumentBuilder:
    """Composes the compiler and the renamer for one or more documents.

    The compiled output always lands in the source document's own
    directory, whatever directory the compiler writes into.
    """

    def __init__(self, config: LitmarkConfig, compiler: DocCompiler | None = None) -> None:
        self.config = config
        self._compiler = compiler

    @property
    def compiler(self) -> DocCompiler:
        if self._compiler is None:
            self._compiler = create_compiler(self.config.compiler)
        return self._compiler

    @property
    def source_dir(self) -> Path:
        return Path(self.config.sources.source_dir)

    def resolve_source(self, name: str | Path) -> Path:
        """Resolve a document name against ``source_dir`` (then the cwd)."""
        path = Path(name)
        candidates = [path] if path.is_absolute() else [self.source_dir / path, path]
        for candidate in candidates:
            if candidate.is_file():
                return candidate.resolve()
        raise SourceNotFoundError(f"Source document not found: {name}", path)

    def list_sources(self) -> list[Path]:
        """Resolved source documents matching the pattern, compiled outputs excluded."""
        if not self.source_dir.is_dir():
            return []
        suffix = self.config.output.suffix
        return sorted(
            p.resolve() for p in self.source_dir.glob(self.config.sources.pattern)
            if p.is_file() and not is_compiled(p.name, suffix)
        )

    def build(self, name: str | Path, *, dry_run: bool = False) -> BuildResult:
        """Compile one document and move the artifact next to it."""
        source = self.resolve_source(name)
        out = self.config.output

        if dry_run:
            artifact = self.compiler.artifact_path(source)
            return BuildResult(
                source_path=source,
                artifact_path=artifact,
                output_path=output_path_for(artifact, source.parent, out.suffix),
                dry_run=True,
            )

        start = time.perf_counter()
        artifact = self.compiler.compile(source)
        dest = rename_artifact(
            artifact,
            source.parent,
            suffix=out.suffix,
            on_conflict=out.on_conflict,
        )
        elapsed = int((time.perf_counter() - start) * 1000)
        logger.info("built %s in %d ms", dest, elapsed)

        return BuildResult(
            source_path=source,
            artifact_path=artifact,
            output_path=dest,
            duration_ms=elapsed,
        )

    def build_many(
        self,
        names: Iterable[str | Path] | None = None,
        *,
        keep_going: bool = False,
        dry_run: bool = False,
    ) -> BuildReport:
        """Build documents in order; all sources when ``names`` is None.

        Stops at the first failure unless ``keep_going`` is set, in which
        case failures are recorded in the report and the build continues.
        """
        targets = list(names) if names is not None else self.list_sources()
        report = BuildReport()

        for name in targets:
            try:
                report.succeeded.append(self.build(name, dry_run=dry_run))
            except LitmarkError as e:
                if not keep_going:
                    raise
                logger.error("build failed for %s: %s", name, e)
                report.failed.append(
                    BuildFailure(source=str(name), error=str(e), error_type=type(e).__name__)
                )

        return report
