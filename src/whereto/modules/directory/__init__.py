"""Directory module."""

from whereto.modules.directory.catalog import DirectoryCache, DirectorySnapshot

__all__ = ["DirectoryCache", "DirectorySnapshot"]
