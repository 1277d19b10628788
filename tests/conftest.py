"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "adapters: Filesystem adapters")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def fixtures_root(tmp_path: Path) -> Path:
    """Build the standard search tree and return its top directory.

    Layout::

        fixtures/
            config.json
            workspace/
                package.json
                packages/
                    backend/
                        local.env
                        temp.txt
    """
    root = tmp_path / "fixtures"
    backend = root / "workspace" / "packages" / "backend"
    backend.mkdir(parents=True)

    (root / "config.json").write_text("{}")
    (root / "workspace" / "package.json").write_text("{}")
    (backend / "local.env").write_text("KEY=value\n")
    (backend / "temp.txt").write_text("")
    return root


@pytest.fixture
def start_dir(fixtures_root: Path) -> Path:
    """The deepest directory of the standard search tree."""
    return fixtures_root / "workspace" / "packages" / "backend"


class RecordingFilesystem:
    """FilesystemPort fake backed by a set of existing paths.

    Records every path it is asked about, in order.
    """

    def __init__(self, existing: set[Path] | None = None) -> None:
        self.existing = existing if existing is not None else set()
        self.checked: list[Path] = []

    def exists(self, path: Path) -> bool:
        self.checked.append(path)
        return path in self.existing


class AsyncRecordingFilesystem(RecordingFilesystem):
    """AsyncFilesystemPort fake with the same behavior as RecordingFilesystem."""

    async def exists(self, path: Path) -> bool:  # type: ignore[override]
        return super().exists(path)


@pytest.fixture
def recording_fs() -> RecordingFilesystem:
    """Empty in-memory filesystem that records lookups."""
    return RecordingFilesystem()


@pytest.fixture
def async_recording_fs() -> AsyncRecordingFilesystem:
    """Async variant of recording_fs."""
    return AsyncRecordingFilesystem()
