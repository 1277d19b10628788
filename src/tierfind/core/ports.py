"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The resolver depends
only on these protocols, never on concrete filesystem access.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class FilesystemPort(Protocol):
    """Blocking existence checks against a filesystem."""

    def exists(self, path: Path) -> bool:
        """Return True if something exists at path.

        Implementations must not raise for inaccessible paths: permission
        errors and other stat failures are reported as False.
        """
        ...


@runtime_checkable
class AsyncFilesystemPort(Protocol):
    """Awaitable existence checks against a filesystem."""

    async def exists(self, path: Path) -> bool:
        """Return True if something exists at path.

        Same contract as FilesystemPort.exists, but awaitable.
        """
        ...
