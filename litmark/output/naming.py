"""Output filename derivation for compiled documents."""

from __future__ import annotations

from pathlib import PurePath

DEFAULT_SUFFIX = ".compiled.md"


def compiled_name(name: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """Replace the last extension of ``name`` with ``suffix``.

    ``typeclasses.md`` becomes ``typeclasses.compiled.md`` and ``README``
    becomes ``README.compiled.md``. Only the final extension is stripped, so
    ``a.b.c.md`` yields ``a.b.c.compiled.md``. Not idempotent: an already
    compiled name gains a second suffix.
    """
    base = PurePath(name).name
    if base in ("", ".", ".."):
        raise ValueError(f"Cannot derive an output name from {name!r}")
    # PurePath.stem leaves dotfiles such as ".notes" intact
    return PurePath(base).stem + suffix


def is_compiled(name: str, suffix: str = DEFAULT_SUFFIX) -> bool:
    """True if ``name`` looks like the output of :func:`compiled_name`."""
    return PurePath(name).name.endswith(suffix)
