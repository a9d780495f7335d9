"""Work out what kind of add-on lives at a path and read its manifest."""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .errors import AddonFormatError, InvalidSourceError
from .io import ArchiveReader, Filesystem, default_archives, default_filesystem
from .manifest import AddonDescriptor, ManifestFormat, load_modern_manifest, parse_legacy_manifest

logger = logging.getLogger(__name__)

PACKED_EXTENSION = ".xpi"

# install.rdf wins when both manifests are present
MANIFEST_PRIORITY = (ManifestFormat.LEGACY, ManifestFormat.MODERN)


class SourceKind(Enum):
    """On-disk representation of an add-on."""
    DIRECTORY = "directory"
    ARCHIVE = "archive"


@dataclass(frozen=True)
class LocatedSource:
    """An add-on path together with what was found there."""
    path: str
    kind: SourceKind
    manifest: ManifestFormat
    descriptor: AddonDescriptor


def is_packed_archive(path: Union[str, Path]) -> bool:
    return str(path).endswith(PACKED_EXTENSION)


def parse_manifest(manifest: ManifestFormat, raw: bytes, source: str) -> AddonDescriptor:
    """Dispatch raw manifest bytes to the matching parser."""
    if manifest is ManifestFormat.LEGACY:
        return parse_legacy_manifest(raw, source)
    return load_modern_manifest(raw, source)


async def _inspect_directory(path: str, fs: Filesystem) -> LocatedSource:
    for manifest in MANIFEST_PRIORITY:
        manifest_path = os.path.join(path, manifest.filename)
        if await fs.exists(manifest_path):
            raw = await fs.read(manifest_path)
            descriptor = parse_manifest(manifest, raw, path)
            return LocatedSource(path, SourceKind.DIRECTORY, manifest, descriptor)

    raise AddonFormatError(f"Couldn't find install.rdf or manifest.json in {path}", path=path)


async def _inspect_archive(path: str, archives: ArchiveReader) -> LocatedSource:
    archive = await archives.load(path)
    for manifest in MANIFEST_PRIORITY:
        if archive.has(manifest.filename):
            raw = await archive.read_entry(manifest.filename)
            descriptor = parse_manifest(manifest, raw, path)
            return LocatedSource(path, SourceKind.ARCHIVE, manifest, descriptor)

    raise AddonFormatError(f"Couldn't find install.rdf or manifest.json in {path}", path=path)


async def inspect_source(
    path: Union[str, Path],
    fs: Optional[Filesystem] = None,
    archives: Optional[ArchiveReader] = None,
) -> LocatedSource:
    """Classify ``path`` and parse the manifest it contains.

    Args:
        path: Add-on directory or .xpi file
        fs: Filesystem collaborator (defaults to the local filesystem)
        archives: Archive collaborator (defaults to the zip reader)

    Returns:
        The located source with its descriptor

    Raises:
        InvalidSourceError: If ``path`` is neither a directory nor an .xpi file
        AddonFormatError: If no manifest is found or it is malformed
        OSError: If the path cannot be read
    """
    fs = fs or default_filesystem
    archives = archives or default_archives
    path = str(path)

    if await fs.is_dir(path):
        located = await _inspect_directory(path, fs)
    elif is_packed_archive(path):
        located = await _inspect_archive(path, archives)
    else:
        raise InvalidSourceError(f"Add-on path is not an xpi or a directory: {path}", path=path)

    logger.debug(
        f"Found {located.manifest.filename} in {located.kind.value} {path}",
        extra={
            "extra_fields": {
                "addon_id": located.descriptor.id,
                "source_kind": located.kind.value,
                "manifest": located.manifest.filename,
            }
        },
    )
    return located


async def locate(
    path: Union[str, Path],
    fs: Optional[Filesystem] = None,
    archives: Optional[ArchiveReader] = None,
) -> AddonDescriptor:
    """Extract the details needed to install the add-on at ``path``."""
    located = await inspect_source(path, fs, archives)
    return located.descriptor


get_details = locate
