"""Markdown ``<stem>.assets`` sidecar detection."""

from __future__ import annotations

from pathlib import Path

from ..errors import NotFoundError
from .stat_provider import StatProvider
from .types import ASSETS_SUFFIX, MARKDOWN_EXTENSION


def assets_candidate_for(file_path: Path) -> Path | None:
    """Return ``notes.assets`` for ``notes.md``, or ``None`` for other files."""
    if file_path.suffix.lower() != MARKDOWN_EXTENSION:
        return None
    return file_path.with_name(file_path.name[: -len(MARKDOWN_EXTENSION)] + ASSETS_SUFFIX)


class AssetResolver:
    """Find the assets folder attached to a markdown file."""

    def __init__(self, stat_provider: StatProvider) -> None:
        self._stat_provider = stat_provider

    async def resolve(self, file_path: Path) -> Path | None:
        """Return the sibling assets directory of ``file_path`` if it exists.

        A missing sidecar, or a sidecar name taken by a plain file, yields
        ``None`` rather than an error.
        """
        candidate = assets_candidate_for(Path(file_path))
        if candidate is None:
            return None
        if not await self._stat_provider.exists(candidate):
            return None
        try:
            candidate_stat = await self._stat_provider.stat(candidate)
        except NotFoundError:
            return None
        return candidate if candidate_stat.is_directory else None


__all__ = ["AssetResolver", "assets_candidate_for"]
