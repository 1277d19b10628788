"""CLI commands for tierfind."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from tierfind.cli.formatting import (
    _configure_logging,
    _parse_keys,
    _print_table,
    _to_json,
)
from tierfind.core.exceptions import TierfindError


app = typer.Typer(
    name="tierfind",
    help="Find files by walking up the directory tree, ranked by priority tiers.",
    no_args_is_help=True,
)

KEYS_HELP = (
    "Candidate file names, highest priority first. "
    "Separate equally ranked names with commas (e.g. 'a.json,b.json')."
)


def _exit_with_error(error: TierfindError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    raise typer.Exit(1) from None


@app.command(name="all")
def find_all(
    keys: list[str] = typer.Argument(..., help=KEYS_HELP),
    cwd: Path | None = typer.Option(
        None,
        "--cwd",
        "-C",
        help="Directory to start from. Defaults to current directory.",
    ),
    stop_dir: Path | None = typer.Option(
        None,
        "--stop-dir",
        "-s",
        help="Highest directory to search (inclusive). Defaults to filesystem root.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each step."),
) -> None:
    """List every match, ranked by priority then distance."""
    from tierfind.discovery import find_tiered

    _configure_logging(verbose)
    try:
        results = find_tiered(_parse_keys(keys), cwd=cwd, stop_dir=stop_dir)
    except TierfindError as e:
        _exit_with_error(e)

    if as_json:
        typer.echo(_to_json(results))
    elif results:
        _print_table(results)
    else:
        typer.echo("No matches found.", err=True)

    if not results:
        raise typer.Exit(1)


@app.command(name="one")
def find_best(
    keys: list[str] = typer.Argument(..., help=KEYS_HELP),
    cwd: Path | None = typer.Option(
        None,
        "--cwd",
        "-C",
        help="Directory to start from. Defaults to current directory.",
    ),
    stop_dir: Path | None = typer.Option(
        None,
        "--stop-dir",
        "-s",
        help="Highest directory to search (inclusive). Defaults to filesystem root.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the match as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each step."),
) -> None:
    """Print the path of the best match."""
    from tierfind.discovery import find_one

    _configure_logging(verbose)
    try:
        result = find_one(_parse_keys(keys), cwd=cwd, stop_dir=stop_dir)
    except TierfindError as e:
        _exit_with_error(e)

    if as_json:
        typer.echo(_to_json(result))
    elif result is not None:
        typer.echo(str(result.path))
    else:
        typer.echo("No match found.", err=True)

    if result is None:
        raise typer.Exit(1)


@app.command()
def root(
    start: Path | None = typer.Argument(
        None,
        help="Directory to start from. Defaults to current directory.",
    ),
) -> None:
    """Print the project root (nearest .tierfind, pyproject.toml or .git)."""
    from tierfind.config import find_project_root

    try:
        typer.echo(str(find_project_root(start)))
    except TierfindError as e:
        _exit_with_error(e)


def main() -> None:
    """Entry point for the CLI."""
    app()
