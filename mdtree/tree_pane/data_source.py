"""Tree data source: top-level roots, children dispatch, and row render info.

This is the seam a tree widget talks to. It deliberately knows nothing about
file CRUD; see ``mdtree.vfs`` for that interface.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..file_tree_model import Entry, ReadPolicy, StatProvider, TreeBuilder
from .workspace_roots import WorkspaceRoot, WorkspaceRootResolver, directories_first_key

OPEN_FILE_COMMAND = "mdtree.openFile"
DRAFT_LABEL_SUFFIX = "[DRAFT]"


@dataclass(frozen=True)
class OpenAction:
    command: str
    title: str
    path: Path


@dataclass(frozen=True)
class RenderInfo:
    """What a tree widget needs to draw one row."""

    label: str
    is_expandable: bool
    open_action: OpenAction | None = None


def entry_label(entry: Entry) -> str:
    return entry.name + (DRAFT_LABEL_SUFFIX if entry.in_draft_folder else "")


def render_info(entry: Entry) -> RenderInfo:
    """Label, expandability, and open action for ``entry``."""
    open_action = None
    if entry.is_file:
        open_action = OpenAction(command=OPEN_FILE_COMMAND, title="Open File", path=entry.path)
    return RenderInfo(
        label=entry_label(entry),
        is_expandable=entry.is_directory or entry.assets_path is not None,
        open_action=open_action,
    )


class TreeDataSource:
    """Children dispatch over an injected builder and root resolver."""

    def __init__(
        self,
        tree_builder: TreeBuilder,
        root_resolver: WorkspaceRootResolver,
        directory_policy: ReadPolicy | None = None,
    ) -> None:
        self.tree_builder = tree_builder
        self.root_resolver = root_resolver
        self.directory_policy = directory_policy or ReadPolicy.markdown_tree()

    @classmethod
    def create(
        cls,
        stat_provider: StatProvider,
        list_workspace_roots: Callable[[], Sequence[WorkspaceRoot]],
        *,
        directory_policy: ReadPolicy | None = None,
        root_sort_key: Callable[[Entry], object] | None = directories_first_key,
    ) -> TreeDataSource:
        """Wire a builder and root resolver around one ``stat_provider``."""
        tree_builder = TreeBuilder(stat_provider)
        root_resolver = WorkspaceRootResolver(tree_builder, list_workspace_roots, root_sort_key=root_sort_key)
        return cls(tree_builder, root_resolver, directory_policy=directory_policy)

    async def get_top_level(self) -> list[Entry]:
        return await self.root_resolver.top_level(self.get_children)

    async def get_children(self, entry: Entry | None = None) -> list[Entry]:
        """Children of ``entry``, or the top-level list when ``entry`` is ``None``.

        Directories are read with the directory policy; a markdown file with an
        assets folder exposes that folder's contents unfiltered.
        """
        if entry is None:
            return await self.get_top_level()
        if entry.is_directory:
            return await self.tree_builder.read_directory(entry.path, self.directory_policy)
        if entry.assets_path is not None:
            return await self.tree_builder.read_directory(entry.assets_path, ReadPolicy())
        return []

    def render_info(self, entry: Entry) -> RenderInfo:
        return render_info(entry)


__all__ = [
    "DRAFT_LABEL_SUFFIX",
    "OPEN_FILE_COMMAND",
    "OpenAction",
    "RenderInfo",
    "TreeDataSource",
    "entry_label",
    "render_info",
]
