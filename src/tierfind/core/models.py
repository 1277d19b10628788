"""Core domain models for tierfind.

These models are pure Python dataclasses with no I/O dependencies.
They represent the search manifest (ordered tiers of candidate names)
and the matches produced by walking up the directory tree.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import TypeAlias

from tierfind.core.exceptions import ConfigurationError


SearchKey: TypeAlias = str | Sequence[str]
PriorityList: TypeAlias = Sequence[SearchKey]


@dataclass(frozen=True, slots=True)
class FoundResult:
    """A single candidate that exists at some level above the start directory.

    Attributes:
        path: Absolute path of the matched file or directory.
        priority_score: Index of the tier the candidate belongs to
            (0 is the highest priority).
        matched_key: The candidate name that matched.
        depth: Number of parent steps from the start directory
            (0 is the start directory itself).

    Example:
        >>> result = FoundResult(
        ...     path=Path("/repo/pyproject.toml"),
        ...     priority_score=0,
        ...     matched_key="pyproject.toml",
        ...     depth=2,
        ... )
        >>> result.directory
        PosixPath('/repo')
    """

    path: Path
    priority_score: int
    matched_key: str
    depth: int

    @property
    def directory(self) -> Path:
        """Directory level the candidate was found in."""
        return self.path.parent

    def to_dict(self) -> dict[str, object]:
        """Serialize to JSON-friendly primitives."""
        return {
            "path": str(self.path),
            "priority_score": self.priority_score,
            "matched_key": self.matched_key,
            "depth": self.depth,
        }


@dataclass(frozen=True, slots=True)
class Tier:
    """A group of equally ranked candidate names.

    Names keep their declaration order, which breaks ties between matches
    found at the same depth.

    Attributes:
        priority: Position of the tier in the manifest.
        names: Candidate names, in declaration order.
    """

    priority: int
    names: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate tier fields after initialization."""
        if self.priority < 0:
            raise ConfigurationError(
                "Tier priority cannot be negative", value=self.priority
            )
        if not self.names:
            raise ConfigurationError(
                "Tier must contain at least one candidate name", value=self.names
            )


def _validate_name(name: object) -> str:
    if not isinstance(name, str):
        raise ConfigurationError(
            f"Search key must be a string, got {type(name).__name__}", value=name
        )
    if not name or "\x00" in name:
        raise ConfigurationError(f"Invalid search key: {name!r}", value=name)
    if PurePath(name).is_absolute() or os.path.isabs(name):
        raise ConfigurationError(
            f"Search key must be relative to the searched directory: {name!r}",
            value=name,
        )
    parts = PurePath(name).parts
    # "." names the level itself and ".." climbs past the boundary.
    if not parts or ".." in parts:
        raise ConfigurationError(
            f"Search key must name an entry inside the searched directory: {name!r}",
            value=name,
        )
    return name


def normalize_manifest(keys: PriorityList | str) -> tuple[Tier, ...]:
    """Turn user supplied search keys into an ordered tuple of tiers.

    A single string is shorthand for a one-tier manifest. Within the
    manifest, a string element is a one-name tier and a list element is a
    tier of equally ranked names.

    Args:
        keys: Ordered search keys, highest priority first.

    Returns:
        Tiers in priority order. Empty when keys is empty.

    Raises:
        ConfigurationError: If a key is not a string, is empty or absolute,
            refers to the directory itself or contains a ".." segment,
            or a tier group is empty.
    """
    if isinstance(keys, str):
        keys = [keys]

    tiers: list[Tier] = []
    for priority, key in enumerate(keys):
        if isinstance(key, str):
            names: tuple[str, ...] = (_validate_name(key),)
        elif isinstance(key, Sequence):
            if not key:
                raise ConfigurationError(
                    f"Tier {priority} has no candidate names", value=key
                )
            # Repeated names in one tier would only duplicate matches.
            names = tuple(dict.fromkeys(_validate_name(name) for name in key))
        else:
            raise ConfigurationError(
                f"Tier {priority} must be a string or a list of strings, "
                f"got {type(key).__name__}",
                value=key,
            )
        tiers.append(Tier(priority=priority, names=names))

    return tuple(tiers)
