"""sass-path-resolver CLI - resolve Sass import specifiers from the command line."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.markup import escape
from rich.table import Table

from .console import console
from .console import error_console
from .exceptions import SassPathResolverError
from .importer import SassPathResolver
from .logging_setup import init_logging
from .settings import ResolverSettings
from .settings import load_settings

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 1
EXIT_ERROR = 2

include_path_option = click.option(
    "-I",
    "--include-path",
    "include_paths",
    multiple=True,
    help="Include path to search (repeatable). Overrides configured include paths.",
)
base_dir_option = click.option(
    "--base-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Base directory for relative include paths (default: current directory)",
)


def _fail(message: str) -> NoReturn:
    error_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    sys.exit(EXIT_ERROR)


def _build_resolver(
    settings: ResolverSettings, include_paths: tuple[str, ...], base_dir: Path | None
) -> SassPathResolver:
    paths = list(include_paths) or settings.include_paths
    if not paths:
        _fail("No include paths given. Pass -I/--include-path or set include_paths in the config file.")
    return SassPathResolver(paths, base_dir=base_dir)


@click.group()
@click.version_option(package_name="sass-path-resolver")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (default: .sass-path-resolver.yaml if present)",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append structured JSONL log records to this file",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, verbose: int, log_file: Path | None):
    """Resolve Sass @use/@import specifiers against include paths."""
    try:
        settings = load_settings(config_file)
    except SassPathResolverError as e:
        _fail(str(e))

    level = settings.log_level
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    init_logging(level, log_file or settings.log_file)

    ctx.obj = settings


@cli.command(name="resolve")
@click.argument("specifier")
@include_path_option
@base_dir_option
@click.option("--url", "as_url", is_flag=True, help="Print a file: URL instead of a path")
@click.pass_obj
def resolve_cmd(
    settings: ResolverSettings,
    specifier: str,
    include_paths: tuple[str, ...],
    base_dir: Path | None,
    as_url: bool,
):
    """Print the file SPECIFIER resolves to."""
    try:
        resolver = _build_resolver(settings, include_paths, base_dir)
        resolution = resolver.resolve(specifier)
    except SassPathResolverError as e:
        _fail(str(e))

    if resolution is None:
        error_console.print(f"[yellow]No match for[/yellow] {escape(specifier)}", highlight=False)
        sys.exit(EXIT_NOT_FOUND)

    logger.info(f"Resolved {specifier} via {resolution.step} under {resolution.include_path}")
    click.echo(resolution.url if as_url else str(resolution.path))


@cli.command(name="explain")
@click.argument("specifier")
@include_path_option
@base_dir_option
@click.pass_obj
def explain_cmd(settings: ResolverSettings, specifier: str, include_paths: tuple[str, ...], base_dir: Path | None):
    """Show how SPECIFIER resolves under each include path."""
    try:
        resolver = _build_resolver(settings, include_paths, base_dir)
        outcomes = resolver.explain(specifier)
    except SassPathResolverError as e:
        _fail(str(e))

    table = Table(title=f"Resolution of {escape(specifier)}")
    table.add_column("Include path", style="cyan")
    table.add_column("Step", style="green")
    table.add_column("Result")

    winner_seen = False
    for include_path, resolution in outcomes:
        if resolution is None:
            table.add_row(escape(str(include_path)), "-", "[dim]no match[/dim]")
            continue
        result = escape(str(resolution.path))
        if not winner_seen:
            result = f"[bold]{result}[/bold]"
            winner_seen = True
        table.add_row(escape(str(include_path)), resolution.step, result)

    console.print(table)
    if not winner_seen:
        sys.exit(EXIT_NOT_FOUND)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
