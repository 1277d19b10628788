"""Core domain module for tierfind.

This module contains pure Python domain models and port definitions.
It has no I/O dependencies and can be tested in isolation.
"""

from tierfind.core.exceptions import ConfigurationError, TierfindError
from tierfind.core.models import (
    FoundResult,
    PriorityList,
    SearchKey,
    Tier,
    normalize_manifest,
)
from tierfind.core.ports import AsyncFilesystemPort, FilesystemPort


__all__ = [
    "AsyncFilesystemPort",
    "ConfigurationError",
    "FilesystemPort",
    "FoundResult",
    "PriorityList",
    "SearchKey",
    "Tier",
    "TierfindError",
    "normalize_manifest",
]
