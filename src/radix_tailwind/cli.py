"""
radix-tailwind CLI.

Commands:
- generate: Rebuild every family stylesheet and the import manifest
- families: List discovered families and their source files
- preset: Print or write a Tailwind preset for named families
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from radix_tailwind._version import get_version
from radix_tailwind.core.errors import RadixTailwindError

console = Console()

app = typer.Typer(
    help="Generate Tailwind CSS color variables from Radix Colors.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        typer.echo(f"radix-colors-tailwind {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """radix-tailwind main callback for global options."""
    pass


@app.command("generate")
def generate_command(
    project_dir: Path = typer.Option(".", "--project", "-p", help="Project directory"),
    source: Path | None = typer.Option(
        None,
        "--source",
        "-s",
        help="Radix colors directory (default: node_modules/@radix-ui/colors)",
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output directory"),
    media_query_dark: bool | None = typer.Option(
        None,
        "--media-query-dark/--no-media-query-dark",
        help="Also emit dark values under prefers-color-scheme: dark",
    ),
    clean: bool | None = typer.Option(
        None, "--clean/--no-clean", help="Remove stale stylesheets from the output directory"
    ),
    workers: int | None = typer.Option(None, "--workers", "-w", min=1, help="Parallel workers"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Generate one stylesheet per Radix family plus the import manifest."""
    from radix_tailwind.core.config import load_config
    from radix_tailwind.core.generator import generate

    _configure_logging(verbose)
    project_dir = project_dir.resolve()

    overrides = {
        "source_dir": source,
        "output_dir": output,
        "media_query_dark": media_query_dark,
        "clean": clean,
        "max_workers": workers,
    }

    try:
        config = load_config(project_dir)
        config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})
        report = generate(config, project_root=project_dir)
    except RadixTailwindError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    written = report.files_written
    console.print(
        f"[green]Generated {len(written)} family stylesheet(s)[/green] in {report.output_dir}"
    )
    if report.manifest_path is not None:
        console.print(f"Manifest: {report.manifest_path}")
    if report.warnings:
        console.print(f"[yellow]Warnings ({len(report.warnings)}):[/yellow]")
        for warning in report.warnings:
            console.print(f"  ⚠ {warning}")


@app.command("families")
def families_command(
    project_dir: Path = typer.Option(".", "--project", "-p", help="Project directory"),
    source: Path | None = typer.Option(None, "--source", "-s", help="Radix colors directory"),
) -> None:
    """List the color families found in the source directory."""
    from radix_tailwind.core.config import load_config
    from radix_tailwind.core.discovery import discover_family_groups, locate_source_dir

    project_dir = project_dir.resolve()
    try:
        config = load_config(project_dir)
        if source is not None:
            config = config.model_copy(update={"source_dir": source})
        source_dir = config.resolve_source_dir(project_dir) or locate_source_dir(project_dir)
        groups = discover_family_groups(source_dir)
    except RadixTailwindError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    table = Table(title=f"Radix families in {source_dir}")
    table.add_column("Family", style="cyan")
    table.add_column("Sources")
    for group in groups:
        table.add_row(group.family, ", ".join(p.name for p in group.sources))
    console.print(table)


@app.command("preset")
def preset_command(
    families: list[str] = typer.Argument(..., help="Family names, e.g. red blue grayAlpha"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON to this file"),
) -> None:
    """Build a Tailwind preset mapping families to the generated variables."""
    from radix_tailwind.core.tailwind_preset import build_preset, export_preset_file

    try:
        if output is not None:
            path = export_preset_file(families, output)
            typer.echo(f"Wrote {path}")
            return
        preset = build_preset(families)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(json.dumps(preset, indent=2))


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
