"""Convenience functions for tiered upward file discovery.

These wrap Resolver and AsyncResolver with keyword options, for callers
that do not need to hold on to a resolver instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tierfind.config import FindOptions
from tierfind.core.services import AsyncResolver, Resolver


if TYPE_CHECKING:
    from tierfind.config import PathInput
    from tierfind.core.models import FoundResult, PriorityList
    from tierfind.core.ports import AsyncFilesystemPort, FilesystemPort


def find_tiered(
    keys: PriorityList | str,
    cwd: PathInput | None = None,
    stop_dir: PathInput | None = None,
    *,
    filesystem: FilesystemPort | None = None,
) -> list[FoundResult]:
    """Find every candidate between cwd and stop_dir.

    Args:
        keys: Ordered search keys. Each element is a tier: a file name, or a
            list of equally ranked file names.
        cwd: Directory to start from. Defaults to the current directory.
        stop_dir: Highest directory to inspect, inclusive. Defaults to the
            filesystem root.
        filesystem: Existence checker. Defaults to the local disk.

    Returns:
        Matches sorted by tier priority, then depth, then order within the tier.

    Example:
        >>> from tierfind import find_tiered
        >>> results = find_tiered(["settings.local.toml", ["settings.toml", "setup.cfg"]])
        >>> for r in results:
        ...     print(r.priority_score, r.depth, r.path)
    """
    options = FindOptions(cwd=cwd, stop_dir=stop_dir)
    return Resolver(filesystem).find_tiered(keys, options)


def find_one(
    keys: PriorityList | str,
    cwd: PathInput | None = None,
    stop_dir: PathInput | None = None,
    *,
    filesystem: FilesystemPort | None = None,
) -> FoundResult | None:
    """Find the best candidate between cwd and stop_dir.

    Each tier is searched all the way up to stop_dir before the next tier
    is tried. Returns None when nothing matches.
    """
    options = FindOptions(cwd=cwd, stop_dir=stop_dir)
    return Resolver(filesystem).find_one(keys, options)


async def resolve(
    keys: PriorityList | str,
    cwd: PathInput | None = None,
    stop_dir: PathInput | None = None,
    *,
    filesystem: AsyncFilesystemPort | None = None,
) -> list[FoundResult]:
    """Awaitable version of find_tiered."""
    options = FindOptions(cwd=cwd, stop_dir=stop_dir)
    return await AsyncResolver(filesystem).find_tiered(keys, options)


async def find_up(
    keys: PriorityList | str,
    cwd: PathInput | None = None,
    stop_dir: PathInput | None = None,
    *,
    filesystem: AsyncFilesystemPort | None = None,
) -> FoundResult | None:
    """Awaitable version of find_one.

    Stops checking the filesystem as soon as the best match is known.
    """
    options = FindOptions(cwd=cwd, stop_dir=stop_dir)
    return await AsyncResolver(filesystem).find_one(keys, options)
