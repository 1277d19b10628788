"""Configuration utilities for tierfind.

This module resolves search options (start and boundary directories) and
provides project root discovery built on top of the resolver.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from tierfind.core.exceptions import ConfigurationError


PathInput: TypeAlias = str | os.PathLike[str]

# One tier: the nearest directory holding any marker wins, ties broken in
# this order.
PROJECT_MARKERS = (".tierfind", "pyproject.toml", ".git")


def _normalize(value: PathInput, base: Path | None = None) -> Path:
    """Make a path absolute and collapse '.', '..' and trailing separators.

    Symlinks are left alone; only the textual form is normalized.
    """
    try:
        path = Path(value).expanduser()
    except (TypeError, RuntimeError) as e:
        raise ConfigurationError(
            f"Cannot interpret {value!r} as a directory", value=value, cause=e
        ) from e

    if "\x00" in str(path):
        raise ConfigurationError(
            f"Directory path contains a NUL byte: {value!r}", value=value
        )

    if not path.is_absolute():
        path = (base if base is not None else Path.cwd()) / path
    return Path(os.path.normpath(path))


@dataclass(frozen=True, slots=True)
class FindOptions:
    """Where a search starts and where it must stop.

    Attributes:
        cwd: Directory to start searching from. Defaults to the current
            working directory.
        stop_dir: Highest directory to inspect (inclusive). Defaults to the
            filesystem root of cwd. Relative values are taken relative to cwd.

    Example:
        >>> options = FindOptions(cwd="packages/backend", stop_dir="..").resolve()
        >>> options.stop_dir == options.cwd.parent
        True
    """

    cwd: PathInput | None = None
    stop_dir: PathInput | None = None

    def resolve(self) -> ResolvedOptions:
        """Return absolute, normalized start and boundary directories.

        Raises:
            ConfigurationError: If either path cannot be interpreted.
        """
        start = _normalize(self.cwd if self.cwd is not None else Path.cwd())
        if self.stop_dir is None:
            boundary = Path(start.anchor)
        else:
            boundary = _normalize(self.stop_dir, base=start)
        return ResolvedOptions(cwd=start, stop_dir=boundary)


@dataclass(frozen=True, slots=True)
class ResolvedOptions:
    """FindOptions with both directories absolute and normalized."""

    cwd: Path
    stop_dir: Path


def find_project_root(start: PathInput | None = None) -> Path:
    """Find the project root directory by walking up from start directory.

    Looks for the marker files in PROJECT_MARKERS. The nearest directory
    containing any of them wins; when one directory holds several markers,
    the earlier marker in this order is reported:
    1. .tierfind - Explicit project marker
    2. pyproject.toml - Python project root
    3. .git - Version control root

    Args:
        start: Directory to start searching from. If None, uses current directory.

    Returns:
        Path to project root directory. Returns start directory if no markers found.

    Example:
        >>> from tierfind.config import find_project_root
        >>> root = find_project_root()
        >>> settings = root / "settings.toml"
    """
    from tierfind.core.services import Resolver

    options = FindOptions(cwd=start).resolve()
    found = Resolver().find_one([list(PROJECT_MARKERS)], options)
    if found is None:
        return options.cwd
    return found.directory
