"""Plugging in a custom filesystem.

Resolver only needs an object with exists(path) -> bool. This is handy
for tests, or for searching a snapshot of paths instead of the live disk.
"""

from pathlib import Path

from tierfind import FindOptions, Resolver


class SnapshotFilesystem:
    """Answers existence checks from a fixed set of paths."""

    def __init__(self, paths: set[Path]) -> None:
        self._paths = paths

    def exists(self, path: Path) -> bool:
        return path in self._paths


snapshot = SnapshotFilesystem(
    {
        Path("/repo/pyproject.toml"),
        Path("/repo/packages/api/.env"),
    }
)
resolver = Resolver(snapshot)
options = FindOptions(cwd="/repo/packages/api/src", stop_dir="/repo")

for found in resolver.find_tiered([".env", "pyproject.toml"], options):
    print(found)
