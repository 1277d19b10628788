"""Filesystem adapters for existence checks on the local disk."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import anyio


if TYPE_CHECKING:
    from pathlib import Path


logger = logging.getLogger(__name__)

# Errors that simply mean "nothing there"; anything else is logged.
_ABSENT_ERRORS = (FileNotFoundError, NotADirectoryError)


class LocalFilesystem:
    """Blocking existence checks using os.stat.

    Implements FilesystemPort. Symlinks are followed, so a dangling link
    counts as absent. Permission errors and other stat failures also count
    as absent.
    """

    def exists(self, path: Path) -> bool:
        """Return True if path can be stat'ed."""
        try:
            os.stat(path)
        except _ABSENT_ERRORS:
            return False
        except OSError as e:
            logger.debug("Treating %s as absent: %s", path, e)
            return False
        return True


class AsyncLocalFilesystem:
    """Awaitable existence checks using anyio.Path.

    Implements AsyncFilesystemPort with the same semantics as
    LocalFilesystem. The stat call runs in a worker thread, so the event
    loop is never blocked.
    """

    async def exists(self, path: Path) -> bool:
        """Return True if path can be stat'ed."""
        try:
            await anyio.Path(path).stat()
        except _ABSENT_ERRORS:
            return False
        except OSError as e:
            logger.debug("Treating %s as absent: %s", path, e)
            return False
        return True
