"""Upward directory traversal.

Produces the directory levels between a start directory and a boundary,
nearest first. Pure path arithmetic: no filesystem access happens here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Level:
    """One directory visited while walking upward.

    Attributes:
        directory: Absolute directory path.
        depth: Parent steps from the start directory (0 for the start itself).
    """

    directory: Path
    depth: int


def iter_levels(start: Path, boundary: Path) -> Iterator[Level]:
    """Yield directories from start up to boundary, both inclusive.

    Both paths must already be absolute and normalized (see
    FindOptions.resolve). If boundary is not an ancestor of start, the walk
    ends at the filesystem root instead.

    Args:
        start: Directory to start from.
        boundary: Highest directory that may be visited.

    Yields:
        Level for each directory, with increasing depth.
    """
    current = start
    depth = 0
    while True:
        yield Level(directory=current, depth=depth)
        if current == boundary:
            logger.debug("Stopped at boundary %s (depth %d)", boundary, depth)
            return
        parent = current.parent
        if parent == current:
            logger.debug(
                "Reached filesystem root %s without meeting boundary %s",
                current,
                boundary,
            )
            return
        current = parent
        depth += 1
