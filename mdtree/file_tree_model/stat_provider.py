"""Storage collaborator used by the tree builder.

``StatProvider`` is the narrow async interface the core needs; the local
implementation runs blocking ``os`` calls on worker threads via
``asyncio.to_thread`` so the event loop never blocks on storage.
"""

from __future__ import annotations

import asyncio
import logging
import os
import stat as stat_module
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..errors import NotDirectoryError, NotFoundError
from .types import FileStat, FileType

logger = logging.getLogger(__name__)


@runtime_checkable
class StatProvider(Protocol):
    async def stat(self, path: Path) -> FileStat:
        """Return stat info, raising ``NotFoundError`` for a missing path."""
        ...

    async def exists(self, path: Path) -> bool:
        """Return whether ``path`` exists; never raises."""
        ...

    async def readdir(self, path: Path) -> list[str]:
        """Return child names in storage order."""
        ...


def file_type_for_mode(mode: int) -> FileType:
    """Map an ``st_mode`` value to a ``FileType``."""
    if stat_module.S_ISREG(mode):
        return FileType.FILE
    if stat_module.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat_module.S_ISLNK(mode):
        return FileType.SYMLINK
    return FileType.UNKNOWN


def file_stat_from_os(st: os.stat_result) -> FileStat:
    return FileStat(
        type=file_type_for_mode(st.st_mode),
        size=int(st.st_size),
        ctime_ms=st.st_ctime * 1000.0,
        mtime_ms=st.st_mtime * 1000.0,
    )


def _stat_sync(path: Path) -> FileStat:
    try:
        st = os.stat(path)
    except FileNotFoundError as exc:
        raise NotFoundError(path) from exc
    except NotADirectoryError as exc:
        # A parent component turned into a file: the path no longer exists.
        raise NotFoundError(path) from exc
    return file_stat_from_os(st)


def _readdir_sync(path: Path) -> list[str]:
    try:
        return os.listdir(path)
    except FileNotFoundError as exc:
        raise NotFoundError(path) from exc
    except NotADirectoryError as exc:
        raise NotDirectoryError(path) from exc


class LocalStatProvider:
    """``StatProvider`` backed by the local file system.

    ``stat`` follows symlinks, so a link reports its target's type and a
    dangling link reports ``NotFoundError``.
    """

    async def stat(self, path: Path) -> FileStat:
        return await asyncio.to_thread(_stat_sync, Path(path))

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(os.path.exists, Path(path))

    async def readdir(self, path: Path) -> list[str]:
        names = await asyncio.to_thread(_readdir_sync, Path(path))
        logger.debug("readdir %s -> %d names", path, len(names))
        return names


__all__ = [
    "StatProvider",
    "LocalStatProvider",
    "file_type_for_mode",
    "file_stat_from_os",
]
