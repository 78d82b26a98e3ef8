"""Literate-document compiler adapters."""

from litmark.compiler.base import DocCompiler
from litmark.compiler.command import CommandCompiler
from litmark.config.models import CompilerConfig

_PROVIDER_MAP: dict[str, type[DocCompiler]] = {
    "command": CommandCompiler,
}


def create_compiler(config: CompilerConfig) -> DocCompiler:
    """Create a compiler adapter from app-level config."""
    cls = _PROVIDER_MAP.get(config.provider)
    if cls is None:
        raise ValueError(
            f"Unsupported compiler provider: {config.provider!r}. "
            f"Supported: {', '.join(_PROVIDER_MAP)}"
        )
    return cls(config)


__all__ = [
    "CommandCompiler",
    "DocCompiler",
    "create_compiler",
]
