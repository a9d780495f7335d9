"""Async filesystem helpers used by the locator and installer."""

import asyncio
import logging
import os
import shutil
from stat import S_ISDIR
from pathlib import Path
from typing import Union

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Filesystem:
    """Local filesystem access.

    Reads go through aiofiles; copies run shutil in a worker thread.
    """

    async def stat(self, path: PathLike) -> os.stat_result:
        return await aiofiles.os.stat(path)

    async def is_dir(self, path: PathLike) -> bool:
        """Whether ``path`` is a directory. Missing paths raise ``FileNotFoundError``."""
        result = await self.stat(path)
        return S_ISDIR(result.st_mode)

    async def exists(self, path: PathLike) -> bool:
        return await aiofiles.os.path.exists(path)

    async def read(self, path: PathLike) -> bytes:
        async with aiofiles.open(path, "rb") as f:
            return await f.read()

    async def copy_file(self, src: PathLike, dst: PathLike) -> None:
        """Copy a single file, creating the destination's parent directory."""
        dst = Path(dst)
        await aiofiles.os.makedirs(dst.parent, exist_ok=True)
        logger.debug(f"Copying {src} -> {dst}")
        await asyncio.to_thread(shutil.copyfile, src, dst)

    async def copy_dir(self, src: PathLike, dst: PathLike) -> None:
        """Recursively copy ``src`` into ``dst``, merging with existing content."""
        logger.debug(f"Copying directory {src} -> {dst}")
        await asyncio.to_thread(shutil.copytree, src, dst, dirs_exist_ok=True)


default_filesystem = Filesystem()
