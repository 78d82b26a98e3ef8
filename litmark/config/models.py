from pydantic import BaseModel, Field, field_validator
from typing import Literal


class CompilerConfig(BaseModel):
    provider: Literal["command"] = "command"
    command: list[str] = Field(default_factory=lambda: [
        "mdoc", "--in", "{source}", "--out", "{target_dir}/{source_name}"
    ])
    target_dir: str = "target/compiled"
    timeout: int = Field(default=300, gt=0)
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("command")
    @classmethod
    def command_not_empty(cls, v: list[str]) -> list[str]:
        if not v or not v[0].strip():
            raise ValueError("compiler command must name an executable")
        return v


class OutputConfig(BaseModel):
    suffix: str = ".compiled.md"
    on_conflict: Literal["overwrite", "fail"] = "overwrite"

    @field_validator("suffix")
    @classmethod
    def suffix_is_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2 or "/" in v or "\\" in v:
            raise ValueError(f"suffix must look like '.ext', got {v!r}")
        return v


class SourcesConfig(BaseModel):
    source_dir: str = "."
    pattern: str = "*.md"


class LitmarkConfig(BaseModel):
    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
