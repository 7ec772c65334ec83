"""Text rendering of a tree data source into indented rows."""

from __future__ import annotations

from dataclasses import dataclass

from ..file_tree_model import Entry, MARKDOWN_EXTENSION
from ..ui_theme import DEFAULT_THEME, UITheme
from .data_source import RenderInfo, TreeDataSource
from .workspace_roots import WORKSPACE_ROOT_SUFFIX


@dataclass(frozen=True)
class TreeRow:
    """One printed row plus the node it came from."""

    entry: Entry
    info: RenderInfo
    depth: int
    expanded: bool


def label_color_for(entry: Entry, theme: UITheme | None = None) -> str:
    """Return ANSI color for a row label."""
    active_theme = theme or DEFAULT_THEME
    if entry.stat is None and entry.name.endswith(WORKSPACE_ROOT_SUFFIX):
        return active_theme.tree_workspace_root
    if entry.in_draft_folder:
        return active_theme.tree_draft
    if entry.is_directory:
        return active_theme.tree_dir
    if entry.extension == MARKDOWN_EXTENSION:
        return active_theme.tree_file_markdown
    return active_theme.tree_file_default


def format_tree_row(row: TreeRow, theme: UITheme | None = None) -> str:
    """Render one row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = "  " * row.depth
    if row.info.is_expandable:
        marker = "▾ " if row.expanded else "▸ "
    else:
        marker = "  "
    color = label_color_for(row.entry, active_theme)
    label = row.info.label + ("/" if row.entry.is_directory else "")
    assets = ""
    if row.entry.assets_path is not None:
        assets = f" {active_theme.tree_assets}+{row.entry.assets_path.name}{reset}"
    return f"{indent}{active_theme.tree_marker}{marker}{reset}{color}{label}{reset}{assets}"


async def collect_tree_rows(data_source: TreeDataSource, max_depth: int) -> list[TreeRow]:
    """Walk the data source depth-first, expanding nodes up to ``max_depth`` levels.

    Any read failure propagates; callers keep their previous output.
    """
    rows: list[TreeRow] = []

    async def walk(entries: list[Entry], depth: int) -> None:
        for entry in entries:
            info = data_source.render_info(entry)
            expand = info.is_expandable and depth + 1 < max_depth
            rows.append(TreeRow(entry=entry, info=info, depth=depth, expanded=expand))
            if expand:
                await walk(await data_source.get_children(entry), depth + 1)

    await walk(await data_source.get_top_level(), 0)
    return rows


async def render_tree_text(data_source: TreeDataSource, max_depth: int, theme: UITheme | None = None) -> str:
    rows = await collect_tree_rows(data_source, max_depth)
    return "".join(format_tree_row(row, theme) + "\n" for row in rows)


__all__ = [
    "TreeRow",
    "collect_tree_rows",
    "format_tree_row",
    "label_color_for",
    "render_tree_text",
]
