"""Local file operations kept apart from the tree data source.

Open, create, rename, and delete are what a tree widget's context actions
need. They share the storage error types with the tree builder, but nothing
in the tree builder depends on this module.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from pathlib import Path

from .errors import NotFoundError
from .file_tree_model import FileStat, LocalStatProvider, StatProvider

logger = logging.getLogger(__name__)


def _remove_tree(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


class LocalFileSystem:
    """Async file CRUD over the local disk."""

    def __init__(self, stat_provider: StatProvider | None = None) -> None:
        self.stat_provider = stat_provider or LocalStatProvider()

    async def stat(self, path: Path) -> FileStat:
        return await self.stat_provider.stat(Path(path))

    async def read_directory(self, path: Path) -> list[tuple[str, FileStat]]:
        """Return ``(name, stat)`` pairs in storage order."""
        path = Path(path)
        names = await self.stat_provider.readdir(path)
        stats = await asyncio.gather(*(self.stat_provider.stat(path / name) for name in names))
        return list(zip(names, stats))

    async def read_file(self, path: Path) -> bytes:
        path = Path(path)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError as exc:
            raise NotFoundError(path) from exc

    async def create_directory(self, path: Path) -> None:
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)

    async def write_file(self, path: Path, content: bytes, *, create: bool, overwrite: bool) -> None:
        """Write ``content``; ``create``/``overwrite`` gate the missing/existing cases.

        Raises ``NotFoundError`` for a missing file without ``create`` and
        ``FileExistsError`` for an existing file without ``overwrite``.
        """
        path = Path(path)
        if not await self.stat_provider.exists(path):
            if not create:
                raise NotFoundError(path)
            await self.create_directory(path.parent)
        elif not overwrite:
            raise FileExistsError(f"File exists: '{path}'")
        await asyncio.to_thread(path.write_bytes, content)
        logger.debug("wrote %d bytes to %s", len(content), path)

    async def delete(self, path: Path, *, recursive: bool) -> None:
        path = Path(path)
        try:
            if recursive:
                await asyncio.to_thread(_remove_tree, path)
            else:
                await asyncio.to_thread(path.unlink)
        except FileNotFoundError as exc:
            raise NotFoundError(path) from exc

    async def rename(self, old_path: Path, new_path: Path, *, overwrite: bool) -> None:
        """Move ``old_path`` to ``new_path``, creating the target's parent."""
        old_path = Path(old_path)
        new_path = Path(new_path)
        if await self.stat_provider.exists(new_path):
            if not overwrite:
                raise FileExistsError(f"File exists: '{new_path}'")
            await asyncio.to_thread(_remove_tree, new_path)
        if not await self.stat_provider.exists(new_path.parent):
            await self.create_directory(new_path.parent)
        try:
            await asyncio.to_thread(os.rename, old_path, new_path)
        except FileNotFoundError as exc:
            raise NotFoundError(old_path) from exc


__all__ = ["LocalFileSystem"]
