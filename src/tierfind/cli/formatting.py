"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table


if TYPE_CHECKING:
    from tierfind.core.models import FoundResult, SearchKey


def _parse_keys(raw_keys: list[str]) -> list[SearchKey]:
    """Turn CLI arguments into search keys.

    Each argument is one tier. Commas separate equally ranked names
    within a tier, so "a.json,b.json" becomes ["a.json", "b.json"].
    """
    keys: list[SearchKey] = []
    for raw in raw_keys:
        names = [name.strip() for name in raw.split(",") if name.strip()]
        if len(names) == 1 and "," not in raw:
            keys.append(names[0])
        else:
            # An argument like "," yields an empty tier, rejected downstream.
            keys.append(names)
    return keys


def _results_table(results: list[FoundResult]) -> Table:
    """Build a Rich table with one row per match."""
    table = Table()
    table.add_column("Priority", justify="right")
    table.add_column("Depth", justify="right")
    table.add_column("Key")
    table.add_column("Path", overflow="fold")
    for result in results:
        table.add_row(
            str(result.priority_score),
            str(result.depth),
            result.matched_key,
            str(result.path),
        )
    return table


def _print_table(results: list[FoundResult]) -> None:
    # Force terminal output to ensure tables render correctly in all environments
    console = Console(force_terminal=True)
    console.print(_results_table(results))


def _to_json(results: list[FoundResult] | FoundResult | None) -> str:
    """Serialize one result, a list of results, or None to JSON."""
    if results is None:
        return "null"
    if isinstance(results, list):
        return json.dumps([r.to_dict() for r in results], indent=2)
    return json.dumps(results.to_dict(), indent=2)


def _configure_logging(verbose: bool) -> None:
    """Send tierfind debug logs to stderr through Rich when verbose."""
    if not verbose:
        return
    logger = logging.getLogger("tierfind")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
