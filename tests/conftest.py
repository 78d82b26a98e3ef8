"""Shared test fixtures for litmark."""

import sys
import textwrap
from pathlib import Path

import pytest

from litmark.config.models import (
    CompilerConfig,
    LitmarkConfig,
    OutputConfig,
    SourcesConfig,
)

# Stand-in for an mdoc-style compiler: copies --in to --out with a banner,
# exits 3 when the source contains FAIL, and writes nothing when it contains
# NO_OUTPUT.
FAKE_COMPILER = textwrap.dedent(
    """\
    import sys

    args = sys.argv[1:]
    src = args[args.index("--in") + 1]
    dest = args[args.index("--out") + 1]
    text = open(src, encoding="utf-8").read()
    if "FAIL" in text:
        sys.stderr.write("error: snippet did not typecheck\\n")
        sys.exit(3)
    if "NO_OUTPUT" not in text:
        with open(dest, "w", encoding="utf-8") as f:
            f.write("<!-- compiled -->\\n" + text)
    print("compiled " + src)
    """
)


@pytest.fixture
def fake_compiler_script(tmp_path):
    script = tmp_path / "fake_mdoc.py"
    script.write_text(FAKE_COMPILER)
    return script


@pytest.fixture
def docs_dir(tmp_path):
    """A docs directory holding a few literate essays."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "variance.md").write_text("# Variance\n\n```scala\nval x = 1\n```\n")
    (docs / "typeclasses.md").write_text("# Type classes\n")
    return docs


@pytest.fixture
def sample_config(tmp_path, docs_dir, fake_compiler_script):
    return LitmarkConfig(
        compiler=CompilerConfig(
            command=[
                sys.executable,
                str(fake_compiler_script),
                "--in",
                "{source}",
                "--out",
                "{target_dir}/{source_name}",
            ],
            target_dir=str(tmp_path / "target" / "compiled"),
            timeout=30,
        ),
        output=OutputConfig(),
        sources=SourcesConfig(source_dir=str(docs_dir)),
    )


@pytest.fixture
def config_file(tmp_path, sample_config):
    """sample_config serialized as a litmark.yaml for CLI tests."""
    import yaml

    path = tmp_path / "litmark.yaml"
    path.write_text(yaml.safe_dump(sample_config.model_dump()))
    return path


@pytest.fixture
def target_dir(sample_config) -> Path:
    return Path(sample_config.compiler.target_dir)
