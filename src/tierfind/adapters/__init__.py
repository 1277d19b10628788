"""Filesystem adapters."""

from tierfind.adapters.filesystem import AsyncLocalFilesystem, LocalFilesystem


__all__ = ["AsyncLocalFilesystem", "LocalFilesystem"]
