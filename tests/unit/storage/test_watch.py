"""Tree watch-signature tests."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from mdtree.file_tree_model import Entry, FileStat, FileType
from mdtree.tree_pane import TreeRow, render_info
from mdtree.watch import build_tree_watch_signature, watched_directories


def _row(entry: Entry, depth: int = 0) -> TreeRow:
    return TreeRow(entry=entry, info=render_info(entry), depth=depth, expanded=False)


class WatchSignatureTests(unittest.TestCase):
    def test_signature_changes_when_child_added_or_touched(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            note = root / "a.md"
            note.write_text("a", encoding="utf-8")

            before = build_tree_watch_signature([root])
            self.assertEqual(before, build_tree_watch_signature([root]))

            (root / "b.md").write_text("b", encoding="utf-8")
            after_add = build_tree_watch_signature([root])
            self.assertNotEqual(before, after_add)

            stat = note.stat()
            os.utime(note, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))
            self.assertNotEqual(after_add, build_tree_watch_signature([root]))

    def test_missing_directory_has_stable_signature(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp).resolve() / "missing"
            self.assertEqual(build_tree_watch_signature([missing]), build_tree_watch_signature([missing]))

    def test_watched_directories_cover_parents_directories_and_assets(self) -> None:
        draft_child = Entry.create("wip.md", "/docs/draft/wip.md")
        draft_child.stat = FileStat(FileType.FILE)
        draft_child.in_draft_folder = True
        directory = Entry.create("parts", "/docs/parts")
        directory.stat = FileStat(FileType.DIRECTORY)
        notes = Entry.create("notes.md", "/docs/notes.md")
        notes.stat = FileStat(FileType.FILE)
        notes.assets_path = Path("/docs/notes.assets")

        watched = watched_directories([_row(draft_child), _row(directory), _row(notes)], roots=[Path("/docs")])

        self.assertEqual(
            watched,
            {Path("/docs"), Path("/docs/draft"), Path("/docs/parts"), Path("/docs/notes.assets")},
        )

    def test_synthetic_workspace_root_row_does_not_watch_its_parent(self) -> None:
        root = Entry.create("docs[Workspace Root]", "/ws/docs")
        child = Entry.create("a.md", "/ws/docs/a.md")
        child.stat = FileStat(FileType.FILE)

        watched = watched_directories([_row(root), _row(child, depth=0)], roots=[Path("/ws/docs")])

        self.assertEqual(watched, {Path("/ws/docs")})
        self.assertNotIn(Path("/ws"), watched)


if __name__ == "__main__":
    unittest.main()
