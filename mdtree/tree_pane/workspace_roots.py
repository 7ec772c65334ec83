"""Workspace-root enumeration and top-level entry construction."""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..file_tree_model import Entry, TreeBuilder

logger = logging.getLogger(__name__)

LOCAL_SCHEME = "file"
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]+$")
WORKSPACE_ROOT_SUFFIX = "[Workspace Root]"


@dataclass(frozen=True)
class WorkspaceRoot:
    """One workspace folder reported by the host environment."""

    name: str
    path: Path
    scheme: str = LOCAL_SCHEME


def directories_first_key(entry: Entry) -> tuple[bool, str]:
    """Sort key placing directories before files, then by case-folded name."""
    return (not entry.is_directory, entry.name.casefold())


def parse_workspace_root(raw: str | Path, name: str | None = None) -> WorkspaceRoot:
    """Turn a CLI/config value into a ``WorkspaceRoot``.

    ``scheme://...`` values keep their scheme (``file://`` is unwrapped to a
    local path); anything else is a local path.
    """
    text = str(raw)
    scheme, sep, rest = text.partition("://")
    if sep and _SCHEME_RE.match(scheme):
        if scheme == LOCAL_SCHEME:
            path = Path(rest).resolve()
            return WorkspaceRoot(name=name or path.name or str(path), path=path)
        return WorkspaceRoot(name=name or Path(rest).name or text, path=Path(rest), scheme=scheme)
    path = Path(text).expanduser().resolve()
    return WorkspaceRoot(name=name or path.name or str(path), path=path)


class StaticWorkspaceRoots:
    """Workspace-root source over a fixed list of paths."""

    def __init__(self, roots: Iterable[str | Path | WorkspaceRoot]) -> None:
        self._roots = [root if isinstance(root, WorkspaceRoot) else parse_workspace_root(root) for root in roots]

    def __call__(self) -> list[WorkspaceRoot]:
        return list(self._roots)


def workspace_root_display_labels(roots: Sequence[Path]) -> list[str]:
    """Return compact labels that keep multiple roots visually distinguishable."""
    if not roots:
        return []

    parts_lists = [root.parts for root in roots]
    common_len = min(len(parts) for parts in parts_lists)
    for idx in range(common_len):
        token = parts_lists[0][idx]
        if any(parts[idx] != token for parts in parts_lists[1:]):
            common_len = idx
            break

    # Keep one shared segment for context (``repo/subdir`` rather than
    # ``subdir``) while dropping long absolute prefixes.
    start_idx = max(1, common_len - 1)

    labels: list[str] = []
    for root in roots:
        suffix = root.parts[start_idx:]
        if suffix:
            labels.append("/".join(suffix))
        else:
            labels.append(root.name or str(root))
    return labels


ChildrenFor = Callable[[Entry], Awaitable[list[Entry]]]


class WorkspaceRootResolver:
    """Build the top-level entry list from the host's workspace roots.

    One local root is elided by one level: ``[root, *root_children]`` with the
    root relabeled and its stat cleared. Several roots are listed as plain
    entries whose children load on expansion.
    """

    def __init__(
        self,
        tree_builder: TreeBuilder,
        list_workspace_roots: Callable[[], Sequence[WorkspaceRoot]],
        root_sort_key: Callable[[Entry], object] | None = directories_first_key,
    ) -> None:
        self._tree_builder = tree_builder
        self._list_workspace_roots = list_workspace_roots
        self._root_sort_key = root_sort_key

    def local_roots(self) -> list[WorkspaceRoot]:
        return [root for root in self._list_workspace_roots() if root.scheme == LOCAL_SCHEME]

    async def top_level(self, children_for: ChildrenFor) -> list[Entry]:
        roots = self.local_roots()
        logger.debug("workspace roots: %s", [str(root.path) for root in roots])
        if not roots:
            return []

        if len(roots) == 1:
            root_entry = await self._tree_builder.entry_for(roots[0].name, roots[0].path)
            children = await children_for(root_entry)
            if self._root_sort_key is not None:
                children.sort(key=self._root_sort_key)
            root_entry.name += WORKSPACE_ROOT_SUFFIX
            root_entry.stat = None
            return [root_entry, *children]

        result: list[Entry] = []
        for root in roots:
            result.append(await self._tree_builder.entry_for(root.name, root.path))
        return result


__all__ = [
    "LOCAL_SCHEME",
    "WORKSPACE_ROOT_SUFFIX",
    "WorkspaceRoot",
    "StaticWorkspaceRoots",
    "WorkspaceRootResolver",
    "directories_first_key",
    "parse_workspace_root",
    "workspace_root_display_labels",
]
