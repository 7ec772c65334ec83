"""Tree-pane surface: workspace roots, children dispatch, and row rendering."""

from __future__ import annotations

from .data_source import (
    DRAFT_LABEL_SUFFIX,
    OPEN_FILE_COMMAND,
    OpenAction,
    RenderInfo,
    TreeDataSource,
    entry_label,
    render_info,
)
from .rendering import TreeRow, collect_tree_rows, format_tree_row, render_tree_text
from .workspace_roots import (
    LOCAL_SCHEME,
    WORKSPACE_ROOT_SUFFIX,
    StaticWorkspaceRoots,
    WorkspaceRoot,
    WorkspaceRootResolver,
    directories_first_key,
    parse_workspace_root,
    workspace_root_display_labels,
)

__all__ = [
    "DRAFT_LABEL_SUFFIX",
    "OPEN_FILE_COMMAND",
    "OpenAction",
    "RenderInfo",
    "TreeDataSource",
    "entry_label",
    "render_info",
    "TreeRow",
    "collect_tree_rows",
    "format_tree_row",
    "render_tree_text",
    "LOCAL_SCHEME",
    "WORKSPACE_ROOT_SUFFIX",
    "StaticWorkspaceRoots",
    "WorkspaceRoot",
    "WorkspaceRootResolver",
    "directories_first_key",
    "parse_workspace_root",
    "workspace_root_display_labels",
]
