from .loader import load_config
from .models import (
    CompilerConfig,
    LitmarkConfig,
    OutputConfig,
    SourcesConfig,
)

__all__ = [
    "CompilerConfig",
    "LitmarkConfig",
    "OutputConfig",
    "SourcesConfig",
    "load_config",
]
