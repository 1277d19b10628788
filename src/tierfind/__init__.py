"""tierfind - Find configuration files by walking up the directory tree.

Candidates are grouped into priority tiers. Every tier is searched from the
start directory up to a boundary directory, and results are ranked by tier
first and by distance from the start second.

Example:
    >>> from tierfind import find_one
    >>> match = find_one(["app.local.toml", ["app.toml", "app.ini"]])
    >>> if match is not None:
    ...     print(match.path, match.priority_score, match.depth)
"""

from tierfind.adapters import AsyncLocalFilesystem, LocalFilesystem
from tierfind.config import FindOptions, ResolvedOptions, find_project_root
from tierfind.core.exceptions import ConfigurationError, TierfindError
from tierfind.core.models import FoundResult, PriorityList, SearchKey, Tier
from tierfind.core.ports import AsyncFilesystemPort, FilesystemPort
from tierfind.core.services import AsyncResolver, Resolver
from tierfind.discovery import find_one, find_tiered, find_up, resolve


__version__ = "0.1.0"

__all__ = [
    "AsyncFilesystemPort",
    "AsyncLocalFilesystem",
    "AsyncResolver",
    "ConfigurationError",
    "FilesystemPort",
    "FindOptions",
    "FoundResult",
    "LocalFilesystem",
    "PriorityList",
    "ResolvedOptions",
    "Resolver",
    "SearchKey",
    "Tier",
    "TierfindError",
    "__version__",
    "find_one",
    "find_project_root",
    "find_tiered",
    "find_up",
    "resolve",
]
