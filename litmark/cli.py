"""CLI entry point for litmark."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from litmark.build import BuildReport, BuildResult, DocumentBuilder
from litmark.config import LitmarkConfig, load_config
from litmark.config.loader import DEFAULT_CONFIG_TEMPLATE
from litmark.errors import LitmarkError
from litmark.log_setup import configure_logging

app = typer.Typer(
    name="litmark",
    help="Compile literate markdown essays into .compiled.md documents.",
)

config_app = typer.Typer(help="Manage litmark configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: LitmarkConfig | None = None
_config_path: str | None = None


def _get_config() -> LitmarkConfig:
    if _config is None:
        return load_config(_config_path)
    return _config


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to litmark.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config, _config_path
    _config = None
    _config_path = config

    # `config init` must work even when the existing file is broken
    if ctx.invoked_subcommand == "config":
        return

    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _complete_document(incomplete: str) -> list[str]:
    """Shell completion: source documents whose name starts with ``incomplete``."""
    try:
        builder = DocumentBuilder(_get_config())
    except ValueError:
        return []
    return [
        p.name for p in builder.list_sources() if p.name.startswith(incomplete)
    ]


def _display_results(results: list[BuildResult], title: str) -> None:
    table = Table(title=title)
    table.add_column("Source", style="cyan")
    table.add_column("Output", style="green")
    table.add_column("Time", justify="right")
    for r in results:
        time_str = "-" if r.dry_run else f"{r.duration_ms} ms"
        table.add_row(r.source_path.name, str(r.output_path), time_str)
    rprint(table)


def _display_report(report: BuildReport) -> None:
    if report.succeeded:
        _display_results(report.succeeded, f"Compiled ({len(report.succeeded)})")
    for failure in report.failed:
        rprint(f"[red]FAILED[/red] {failure.source} ({failure.error_type}): {escape(failure.error)}")


@app.command("compile")
def compile_cmd(
    file: Annotated[
        str,
        typer.Argument(
            help="Source document to compile",
            autocompletion=_complete_document,
        ),
    ],
    dry_run: bool = typer.Option(False, "--dry-run", help="Show paths without compiling"),
) -> None:
    """Compile one literate document and place FILE.compiled.md next to it."""
    builder = DocumentBuilder(_get_config())

    try:
        result = builder.build(file, dry_run=dry_run)
    except LitmarkError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if dry_run:
        rprint("[yellow](dry run: compiler not invoked)[/yellow]")
        rprint(f"  artifact: {result.artifact_path}")
        rprint(f"  output:   {result.output_path}")
        return

    rprint(f"[green]Compiled[/green] {result.output_path} ({result.duration_ms} ms)")


@app.command()
def build(
    files: Annotated[
        list[str] | None,
        typer.Argument(help="Documents to compile (default: all sources)"),
    ] = None,
    keep_going: bool = typer.Option(
        False, "--keep-going", "-k", help="Continue past failing documents"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show paths without compiling"),
) -> None:
    """Compile several documents in sequence."""
    builder = DocumentBuilder(_get_config())
    names = files or None

    if names is None and not builder.list_sources():
        rprint("[yellow]No source documents found.[/yellow]")
        raise typer.Exit(0)

    try:
        report = builder.build_many(names, keep_going=keep_going, dry_run=dry_run)
    except LitmarkError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _display_report(report)
    if not report.ok:
        raise typer.Exit(1)


@app.command("list")
def list_cmd() -> None:
    """List compilable source documents."""
    builder = DocumentBuilder(_get_config())
    sources = builder.list_sources()
    if not sources:
        rprint("[yellow]No source documents found.[/yellow]")
        return
    for p in sources:
        rprint(str(p.relative_to(builder.source_dir.resolve())))


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    try:
        cfg = _get_config()
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default litmark.yaml in current directory."""
    target = Path("litmark.yaml")
    if target.exists() and not force:
        rprint("[yellow]litmark.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
