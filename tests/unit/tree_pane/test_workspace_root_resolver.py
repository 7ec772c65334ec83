"""Workspace-root resolution tests for single, multiple, and remote roots."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from mdtree.file_tree_model import Entry, LocalStatProvider
from mdtree.tree_pane import (
    StaticWorkspaceRoots,
    TreeDataSource,
    WorkspaceRoot,
    directories_first_key,
    parse_workspace_root,
    workspace_root_display_labels,
)


def _make_workspace(root: Path) -> None:
    (root / "zeta.md").write_text("", encoding="utf-8")
    (root / "Alpha.md").write_text("", encoding="utf-8")
    (root / "image.png").write_text("", encoding="utf-8")
    (root / "chapters").mkdir()
    (root / "Appendix").mkdir()
    (root / "zeta.assets").mkdir()


class SingleRootTests(unittest.IsolatedAsyncioTestCase):
    async def test_single_root_is_listed_with_its_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve() / "book"
            root.mkdir()
            _make_workspace(root)
            source = TreeDataSource.create(LocalStatProvider(), StaticWorkspaceRoots([root]))

            top = await source.get_top_level()

            self.assertEqual(top[0].name, "book[Workspace Root]")
            self.assertIsNone(top[0].stat)
            self.assertEqual(top[0].path, root)
            self.assertEqual([entry.name for entry in top[1:]], ["Appendix", "chapters", "Alpha.md", "zeta.md"])
            self.assertEqual(len(top), 1 + 4)
            self.assertEqual(top[-1].assets_path, root / "zeta.assets")

    async def test_single_root_sort_key_can_be_disabled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _make_workspace(root)
            source = TreeDataSource.create(LocalStatProvider(), StaticWorkspaceRoots([root]), root_sort_key=None)

            top = await source.get_top_level()
            listed = await source.tree_builder.read_directory(root, source.directory_policy)

            self.assertEqual([entry.name for entry in top[1:]], [entry.name for entry in listed])

    async def test_remote_roots_are_excluded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.md").write_text("", encoding="utf-8")
            roots = [
                WorkspaceRoot(name="remote", path=Path("/srv/remote"), scheme="vscode-remote"),
                WorkspaceRoot(name="local", path=root),
            ]
            source = TreeDataSource.create(LocalStatProvider(), lambda: roots)

            top = await source.get_top_level()

            self.assertEqual([entry.name for entry in top], ["local[Workspace Root]", "a.md"])


class MultiRootTests(unittest.IsolatedAsyncioTestCase):
    async def test_multiple_roots_are_plain_entries_without_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base = Path(tmp).resolve()
            first = base / "A"
            second = base / "B"
            first.mkdir()
            second.mkdir()
            (first / "a.md").write_text("", encoding="utf-8")
            source = TreeDataSource.create(LocalStatProvider(), StaticWorkspaceRoots([first, second]))

            top = await source.get_top_level()

            self.assertEqual([entry.name for entry in top], ["A", "B"])
            self.assertTrue(all(entry.stat is not None and entry.is_directory for entry in top))
            children = await source.get_children(top[0])
            self.assertEqual([entry.name for entry in children], ["a.md"])

    async def test_zero_roots_yield_empty_list(self) -> None:
        source = TreeDataSource.create(LocalStatProvider(), lambda: [])
        self.assertEqual(await source.get_top_level(), [])

    async def test_only_remote_roots_yield_empty_list(self) -> None:
        roots = [WorkspaceRoot(name="r", path=Path("/r"), scheme="ssh")]
        source = TreeDataSource.create(LocalStatProvider(), lambda: roots)
        self.assertEqual(await source.get_children(None), [])


class WorkspaceRootHelpersTests(unittest.TestCase):
    def test_parse_workspace_root_schemes(self) -> None:
        local = parse_workspace_root("/tmp/project")
        self.assertEqual(local.scheme, "file")
        self.assertEqual(local.name, "project")

        unwrapped = parse_workspace_root("file:///tmp/project")
        self.assertEqual(unwrapped.scheme, "file")
        self.assertEqual(unwrapped.path, Path("/tmp/project").resolve())

        remote = parse_workspace_root("ssh://host/home/docs")
        self.assertEqual(remote.scheme, "ssh")
        self.assertEqual(remote.name, "docs")

    def test_directories_first_key(self) -> None:
        file_entry = Entry.create("a.md", "/x/a.md")
        self.assertEqual(directories_first_key(file_entry), (True, "a.md"))

    def test_workspace_root_display_labels_show_common_parent_context(self) -> None:
        root = Path("/tmp/project").resolve()
        nested = (root / "nested").resolve()

        self.assertEqual(workspace_root_display_labels([root, nested]), ["project", "project/nested"])

    def test_workspace_root_display_labels_preserve_distinguishing_prefix(self) -> None:
        first = Path("/tmp/alpha/docs").resolve()
        second = Path("/tmp/beta/docs").resolve()

        self.assertEqual(workspace_root_display_labels([first, second]), ["tmp/alpha/docs", "tmp/beta/docs"])
        self.assertEqual(workspace_root_display_labels([]), [])


if __name__ == "__main__":
    unittest.main()
