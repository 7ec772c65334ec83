"""Directory listing with markdown filtering, assets hiding, and draft flattening."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable
from pathlib import Path

from ..errors import CyclicStructureError
from .assets import AssetResolver
from .stat_provider import StatProvider
from .types import ASSETS_SUFFIX, MARKDOWN_EXTENSION, Entry, ReadPolicy

logger = logging.getLogger(__name__)


def canonical_path(path: Path) -> Path:
    """Return ``path`` with symlinks and ``..`` resolved."""
    return Path(os.path.realpath(path))


def is_hidden_by_policy(entry: Entry, policy: ReadPolicy) -> bool:
    """Return whether the markdown-only or assets-folder switch drops ``entry``."""
    if policy.show_only_markdown and entry.is_file and entry.extension != MARKDOWN_EXTENSION:
        return True
    if policy.hide_assets_folder and entry.is_directory and entry.path.name.endswith(ASSETS_SUFFIX):
        return True
    return False


class TreeBuilder:
    """Build ordered ``Entry`` lists for one directory at a time.

    Collaborators are injected; the builder keeps no state between calls, so
    every ``read_directory`` returns fresh entries.
    """

    def __init__(
        self,
        stat_provider: StatProvider,
        asset_resolver: AssetResolver | None = None,
        canonicalize: Callable[[Path], Path] = canonical_path,
    ) -> None:
        self.stat_provider = stat_provider
        self.asset_resolver = asset_resolver or AssetResolver(stat_provider)
        self._canonicalize = canonicalize

    async def _canonical(self, path: Path) -> Path:
        return await asyncio.to_thread(self._canonicalize, path)

    async def entry_for(self, name: str, path: Path) -> Entry:
        """Create and finalize one entry."""
        return await Entry.create(name, path).finalize(self.stat_provider, self.asset_resolver)

    async def read_directory(self, path: Path, policy: ReadPolicy | None = None) -> list[Entry]:
        """List ``path`` applying ``policy``; no sorting is applied.

        The read is all-or-nothing: a failing ``readdir`` or child ``stat``
        propagates and no partial list is returned. Draft flattening raises
        ``CyclicStructureError`` when it would re-enter a directory already on
        the current expansion chain.
        """
        path = Path(path)
        policy = policy or ReadPolicy()
        return await self._read(path, policy, (await self._canonical(path),))

    async def _read(self, directory: Path, policy: ReadPolicy, chain: tuple[Path, ...]) -> list[Entry]:
        names = await self.stat_provider.readdir(directory)
        logger.debug("read_directory %s (%d names, %s)", directory, len(names), policy)
        children = await asyncio.gather(*(self.entry_for(name, directory / name) for name in names))

        result: list[Entry] = []
        for entry in children:
            if is_hidden_by_policy(entry, policy):
                continue
            if policy.flatten_draft_folders and entry.is_directory and entry.is_draft_folder:
                draft_canonical = await self._canonical(entry.path)
                if draft_canonical in chain:
                    raise CyclicStructureError(entry.path, list(chain))
                inlined = await self._read(entry.path, policy, chain + (draft_canonical,))
                for child in inlined:
                    child.in_draft_folder = True
                result.extend(inlined)
                continue
            result.append(entry)
        return result


__all__ = ["TreeBuilder", "canonical_path", "is_hidden_by_policy"]
