"""CLI for tierfind."""

from tierfind.cli.main import app, main


__all__ = ["app", "main"]
