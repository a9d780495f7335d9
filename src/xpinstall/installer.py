"""Install an add-on into a profile's extensions directory."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .errors import AddonFormatError
from .io import ArchiveReader, Filesystem, default_archives, default_filesystem
from .locator import PACKED_EXTENSION, SourceKind, inspect_source

logger = logging.getLogger(__name__)


def destination_stem(install_dir: Union[str, Path], addon_id: str, source: str) -> str:
    """Join the add-on ID onto the install directory.

    The ID becomes a single file or directory name, so it must not be a path.

    Raises:
        AddonFormatError: If the ID is absolute, carries a drive or separator,
            or names the current or parent directory
    """
    separators = {sep for sep in (os.sep, os.altsep, "/") if sep}
    if (
        addon_id in (".", "..")
        or os.path.isabs(addon_id)
        or os.path.splitdrive(addon_id)[0]
        or any(sep in addon_id for sep in separators)
    ):
        raise AddonFormatError(
            f"Add-on ID is not a valid file name: {addon_id!r} in {source}",
            path=source,
            addon_id=addon_id,
        )
    return os.path.join(str(install_dir), addon_id)


async def install(
    extension_path: Union[str, Path],
    install_dir: Union[str, Path],
    fs: Optional[Filesystem] = None,
    archives: Optional[ArchiveReader] = None,
) -> str:
    """Install an extension to the given directory.

    Packed archives are copied to ``<install_dir>/<id>.xpi``, or expanded into
    ``<install_dir>/<id>`` when the manifest asks to be unpacked. Directories
    are copied recursively to ``<install_dir>/<id>``.

    Args:
        extension_path: Path to the extension, as either an .xpi file or a directory
        install_dir: Directory to install the extension in
        fs: Filesystem collaborator
        archives: Archive collaborator

    Returns:
        The add-on ID once installed
    """
    fs = fs or default_filesystem
    archives = archives or default_archives

    located = await inspect_source(extension_path, fs, archives)
    details = located.descriptor
    dst = destination_stem(install_dir, details.id, located.path)

    if located.kind is SourceKind.ARCHIVE:
        if not details.unpack:
            target = dst + PACKED_EXTENSION
            await fs.copy_file(located.path, target)
        else:
            target = dst
            await archives.unzip(located.path, target)
    else:
        target = dst
        await fs.copy_dir(located.path, target)

    logger.info(
        f"Installed {details} to {target}",
        extra={
            "extra_fields": {
                "addon_id": details.id,
                "source": located.path,
                "target": target,
                "unpacked": located.kind is SourceKind.DIRECTORY or details.unpack,
            }
        },
    )
    return details.id
