"""Filesystem and archive access."""

from .filesystem import Filesystem, default_filesystem
from .archive import ArchiveReader, ZipArchive, default_archives

__all__ = [
    "Filesystem",
    "default_filesystem",
    "ArchiveReader",
    "ZipArchive",
    "default_archives",
]
