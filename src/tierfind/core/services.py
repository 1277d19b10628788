"""Core domain services for tierfind.

Resolver and AsyncResolver implement the same search: tiers are tried in
priority order, and each tier is looked up at every directory level from the
start directory up to the boundary before the next tier is considered.
Matches therefore come out already ordered by (priority, depth, name order),
and the first match is always the best one.
"""

from __future__ import annotations

import logging
from contextlib import aclosing
from typing import TYPE_CHECKING

from tierfind.config import FindOptions, ResolvedOptions
from tierfind.core.models import FoundResult, PriorityList, Tier, normalize_manifest
from tierfind.core.traversal import Level, iter_levels


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Iterator

    from tierfind.core.ports import AsyncFilesystemPort, FilesystemPort


logger = logging.getLogger(__name__)


def _prepare(
    keys: PriorityList | str,
    options: FindOptions | ResolvedOptions | None,
) -> tuple[tuple[Tier, ...], tuple[Level, ...]]:
    """Validate keys and options and compute the levels to visit."""
    tiers = normalize_manifest(keys)
    if isinstance(options, ResolvedOptions):
        resolved = options
    else:
        resolved = (options or FindOptions()).resolve()

    levels = tuple(iter_levels(resolved.cwd, resolved.stop_dir))
    logger.debug(
        "Searching %d tier(s) across %d level(s) from %s up to %s",
        len(tiers),
        len(levels),
        resolved.cwd,
        resolved.stop_dir,
    )
    return tiers, levels


class Resolver:
    """Finds tiered candidate files in a directory and its parents."""

    def __init__(self, filesystem: FilesystemPort | None = None) -> None:
        if filesystem is None:
            from tierfind.adapters.filesystem import LocalFilesystem

            filesystem = LocalFilesystem()
        self._filesystem = filesystem

    def iter_matches(
        self,
        keys: PriorityList | str,
        options: FindOptions | ResolvedOptions | None = None,
    ) -> Iterator[FoundResult]:
        """Lazily yield matches, best first.

        Keys and options are validated before this returns; filesystem
        checks happen only as the iterator is consumed, so taking the first
        element stops the search early.

        Args:
            keys: Ordered search keys, highest priority first.
            options: Start and boundary directories. Defaults to the current
                working directory and its filesystem root.

        Returns:
            Iterator of FoundResult ordered by priority, depth, then name order.

        Raises:
            ConfigurationError: If keys or options are malformed.
        """
        tiers, levels = _prepare(keys, options)
        return self._scan(tiers, levels)

    def _scan(
        self, tiers: tuple[Tier, ...], levels: tuple[Level, ...]
    ) -> Iterator[FoundResult]:
        for tier in tiers:
            for level in levels:
                for name in tier.names:
                    path = level.directory / name
                    if self._filesystem.exists(path):
                        yield FoundResult(
                            path=path,
                            priority_score=tier.priority,
                            matched_key=name,
                            depth=level.depth,
                        )

    def find_tiered(
        self,
        keys: PriorityList | str,
        options: FindOptions | ResolvedOptions | None = None,
    ) -> list[FoundResult]:
        """Return every match between the start directory and the boundary.

        Args:
            keys: Ordered search keys, highest priority first.
            options: Start and boundary directories.

        Returns:
            Matches sorted by priority, then depth, then name order within
            the tier. Empty if nothing matched.
        """
        return list(self.iter_matches(keys, options))

    def find_one(
        self,
        keys: PriorityList | str,
        options: FindOptions | ResolvedOptions | None = None,
    ) -> FoundResult | None:
        """Return the highest ranked match, or None if nothing matched.

        A higher priority tier found far away wins over a lower priority
        tier found in the start directory.
        """
        return next(self.iter_matches(keys, options), None)


class AsyncResolver:
    """Awaitable counterpart of Resolver.

    Existence checks are awaited one at a time in the same order as the
    blocking resolver, so both return identical results.
    """

    def __init__(self, filesystem: AsyncFilesystemPort | None = None) -> None:
        if filesystem is None:
            from tierfind.adapters.filesystem import AsyncLocalFilesystem

            filesystem = AsyncLocalFilesystem()
        self._filesystem = filesystem

    def iter_matches(
        self,
        keys: PriorityList | str,
        options: FindOptions | ResolvedOptions | None = None,
    ) -> AsyncGenerator[FoundResult, None]:
        """Lazily yield matches, best first. See Resolver.iter_matches."""
        tiers, levels = _prepare(keys, options)
        return self._scan(tiers, levels)

    async def _scan(
        self, tiers: tuple[Tier, ...], levels: tuple[Level, ...]
    ) -> AsyncGenerator[FoundResult, None]:
        for tier in tiers:
            for level in levels:
                for name in tier.names:
                    path = level.directory / name
                    if await self._filesystem.exists(path):
                        yield FoundResult(
                            path=path,
                            priority_score=tier.priority,
                            matched_key=name,
                            depth=level.depth,
                        )

    async def find_tiered(
        self,
        keys: PriorityList | str,
        options: FindOptions | ResolvedOptions | None = None,
    ) -> list[FoundResult]:
        """Return every match between the start directory and the boundary."""
        return [match async for match in self.iter_matches(keys, options)]

    async def find_one(
        self,
        keys: PriorityList | str,
        options: FindOptions | ResolvedOptions | None = None,
    ) -> FoundResult | None:
        """Return the highest ranked match, or None if nothing matched."""
        async with aclosing(self.iter_matches(keys, options)) as matches:
            async for match in matches:
                return match
        return None
