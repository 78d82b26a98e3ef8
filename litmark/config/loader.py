"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import LitmarkConfig


def load_config(cli_path: str | None = None) -> LitmarkConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    if cli_path and not Path(cli_path).exists():
        raise ValueError(f"Config file not found: {cli_path}")

    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./litmark.yaml"),
        Path.home() / ".litmark" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return LitmarkConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return LitmarkConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `litmark config init`
DEFAULT_CONFIG_TEMPLATE = """\
# litmark.yaml

# Literate-document compiler (invoked once per document)
compiler:
  provider: "command"
  # Placeholders: {source} {source_name} {source_dir} {target_dir}
  command: ["mdoc", "--in", "{source}", "--out", "{target_dir}/{source_name}"]
  target_dir: "target/compiled"  # compiler output; must not be a source directory
  timeout: 300                   # seconds
  # env:
  #   JAVA_OPTS: "-Xmx1g"

# Compiled output placed next to each source
output:
  suffix: ".compiled.md"
  on_conflict: "overwrite"       # overwrite | fail

# Source documents
sources:
  source_dir: "."
  pattern: "*.md"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
