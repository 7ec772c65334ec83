"""File-system watch signatures for poll-based refreshes.

Computes cheap hashes over the stat metadata of displayed directories. The
CLI compares signatures between polls and re-reads the tree on change.
"""

from __future__ import annotations

import hashlib
import os
from collections.abc import Iterable
from pathlib import Path

from .tree_pane import TreeRow


def _update_digest(digest, token: str) -> None:
    """Append a token plus separator byte to a hash digest."""
    digest.update(token.encode("utf-8", errors="surrogateescape"))
    digest.update(b"\0")


def _path_stat_signature(path: Path) -> tuple[str, int, int, int]:
    """Return a stable stat tuple describing ``path`` existence and metadata."""
    try:
        st = path.stat()
    except FileNotFoundError:
        return ("missing", 0, 0, 0)
    except OSError:
        return ("error", 0, 0, 0)
    return ("ok", st.st_mtime_ns, st.st_size, st.st_mode)


def watched_directories(rows: Iterable[TreeRow], roots: Iterable[Path] = ()) -> set[Path]:
    """Directories whose contents feed the rendered ``rows``.

    Includes each row's parent (which covers flattened draft folders), every
    expanded directory, and every assets folder. Rows without a stat are
    synthetic workspace roots; they contribute nothing beyond ``roots``.
    """
    directories = {Path(root) for root in roots}
    for row in rows:
        if row.entry.stat is None:
            continue
        directories.add(row.entry.path.parent)
        if row.entry.is_directory:
            directories.add(row.entry.path)
        if row.entry.assets_path is not None:
            directories.add(row.entry.assets_path)
    return directories


def build_tree_watch_signature(directories: Iterable[Path]) -> str:
    """Build a digest over each directory's own stat and its children's stats."""
    digest = hashlib.blake2b(digest_size=20)

    for directory in sorted(set(directories), key=lambda p: str(p)):
        _update_digest(digest, f"dir:{directory}")
        stat_state, _stat_mtime, _stat_size, stat_mode = _path_stat_signature(directory)
        _update_digest(digest, f"dir_stat:{stat_state}:{stat_mode}")
        if stat_state != "ok":
            continue
        if not directory.is_dir():
            _update_digest(digest, "children:not_dir")
            continue

        children: list[tuple[str, int, int, int, str]] = []
        try:
            with os.scandir(directory) as entries:
                for child in entries:
                    try:
                        st = child.stat()
                        state = "ok"
                        mtime_ns, size, mode = st.st_mtime_ns, st.st_size, st.st_mode
                    except OSError:
                        state = "error"
                        mtime_ns, size, mode = 0, 0, 0
                    children.append((child.name, mtime_ns, size, mode, state))
        except OSError:
            _update_digest(digest, "children:error")
            continue

        children.sort(key=lambda item: item[0])
        for name, mtime_ns, size, mode, state in children:
            _update_digest(digest, f"child:{name}:{state}:{mtime_ns}:{size}:{mode}")

    return digest.hexdigest()


__all__ = ["build_tree_watch_signature", "watched_directories"]
