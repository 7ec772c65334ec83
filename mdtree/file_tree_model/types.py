"""Domain datatypes for markdown-tree entries and listing policies."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .assets import AssetResolver
    from .stat_provider import StatProvider

MARKDOWN_EXTENSION = ".md"
ASSETS_SUFFIX = ".assets"
DRAFT_FOLDER_NAME = "draft"


class FileType(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FileStat:
    """Stat snapshot observed from the storage layer."""

    type: FileType
    size: int = 0
    ctime_ms: float = 0.0
    mtime_ms: float = 0.0

    @property
    def is_file(self) -> bool:
        return self.type is FileType.FILE

    @property
    def is_directory(self) -> bool:
        return self.type is FileType.DIRECTORY


@dataclass(frozen=True)
class ReadPolicy:
    """Independent switches applied by ``TreeBuilder.read_directory``."""

    show_only_markdown: bool = False
    hide_assets_folder: bool = False
    flatten_draft_folders: bool = False

    @classmethod
    def markdown_tree(cls) -> ReadPolicy:
        """Policy used when a directory node is expanded."""
        return cls(show_only_markdown=True, hide_assets_folder=True, flatten_draft_folders=True)


@dataclass
class Entry:
    """One node in the displayed tree (file, directory, or synthetic root).

    Built fresh on every directory read. ``stat`` stays ``None`` until
    :meth:`finalize` runs; the single-workspace-root entry clears it again.
    """

    name: str
    path: Path
    extension: str = ""
    is_draft_folder: bool = False
    stat: FileStat | None = None
    assets_path: Path | None = None
    in_draft_folder: bool = False

    @classmethod
    def create(cls, name: str, path: Path | str) -> Entry:
        """Derive the synchronous fields from ``name`` and ``path``."""
        path = Path(path)
        return cls(
            name=name,
            path=path,
            extension=path.suffix.lower(),
            is_draft_folder=path.name.lower() == DRAFT_FOLDER_NAME,
        )

    @property
    def is_directory(self) -> bool:
        return self.stat is not None and self.stat.is_directory

    @property
    def is_file(self) -> bool:
        return self.stat is not None and self.stat.is_file

    @property
    def is_markdown(self) -> bool:
        return self.extension == MARKDOWN_EXTENSION

    async def finalize(self, stat_provider: StatProvider, asset_resolver: AssetResolver) -> Entry:
        """Resolve ``stat`` and, for markdown files, the assets sidecar.

        Raises ``NotFoundError`` when the path vanished since it was listed.
        """
        self.stat = await stat_provider.stat(self.path)
        if not self.stat.is_file:
            self.extension = ""
        if not self.stat.is_directory:
            self.is_draft_folder = False
        if self.is_markdown and self.stat.is_file:
            self.assets_path = await asset_resolver.resolve(self.path)
        return self


__all__ = [
    "ASSETS_SUFFIX",
    "DRAFT_FOLDER_NAME",
    "MARKDOWN_EXTENSION",
    "Entry",
    "FileStat",
    "FileType",
    "ReadPolicy",
]
