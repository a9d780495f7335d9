"""Async access to zip-format add-on archives."""

import asyncio
import logging
import shutil
import zipfile
from pathlib import Path
from typing import FrozenSet, Union

from ..errors import AddonFormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ZipArchive:
    """Handle on an opened archive.

    Member names are indexed once on load; member contents are read lazily.
    """

    def __init__(self, path: PathLike, names: FrozenSet[str]) -> None:
        self.path = Path(path)
        self.names = names

    def has(self, name: str) -> bool:
        return name in self.names

    def _read(self, name: str) -> bytes:
        with zipfile.ZipFile(self.path, "r") as zf:
            return zf.read(name)

    async def read_entry(self, name: str) -> bytes:
        """Read a member's bytes. Unknown members raise ``KeyError``."""
        return await asyncio.to_thread(self._read, name)


def _is_safe_path(base_dir: Path, member_path: str) -> bool:
    """Check if extraction path stays inside ``base_dir`` (no path traversal)."""
    base = base_dir.resolve()
    target = (base / member_path).resolve()
    return target == base or base in target.parents


def _extract_zip(archive_path: Path, extract_to: Path) -> int:
    extract_to.mkdir(parents=True, exist_ok=True)
    count = 0

    with zipfile.ZipFile(archive_path, "r") as zip_ref:
        for info in zip_ref.infolist():
            member = info.filename
            if not _is_safe_path(extract_to, member):
                raise AddonFormatError(
                    f"Archive entry escapes destination: {member}",
                    path=str(archive_path),
                    entry=member,
                )

            target_path = extract_to / member
            if info.is_dir():
                target_path.mkdir(parents=True, exist_ok=True)
                continue

            target_path.parent.mkdir(parents=True, exist_ok=True)
            with zip_ref.open(info) as source, open(target_path, "wb") as target:
                shutil.copyfileobj(source, target, 8192)
            count += 1

    return count


class ArchiveReader:
    """Opens and expands zip archives."""

    async def load(self, path: PathLike) -> ZipArchive:
        """Open an archive and index its members.

        Raises:
            zipfile.BadZipFile: If the file is not a zip archive
        """
        def namelist() -> FrozenSet[str]:
            with zipfile.ZipFile(path, "r") as zf:
                return frozenset(zf.namelist())

        names = await asyncio.to_thread(namelist)
        logger.debug(f"Opened archive {path} ({len(names)} entries)")
        return ZipArchive(path, names)

    async def unzip(self, path: PathLike, dest: PathLike) -> None:
        """Expand every entry of the archive at ``path`` into ``dest``."""
        count = await asyncio.to_thread(_extract_zip, Path(path), Path(dest))
        logger.debug(f"Extracted {count} file(s) from {path} into {dest}")


default_archives = ArchiveReader()
