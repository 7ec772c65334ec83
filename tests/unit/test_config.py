"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from mdtree import config
from mdtree.file_tree_model import ReadPolicy


class ConfigBehaviorTests(unittest.TestCase):
    def test_directory_policy_defaults_to_markdown_tree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "mdtree.json"
            with mock.patch("mdtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_directory_policy(), ReadPolicy.markdown_tree())

    def test_directory_policy_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "mdtree.json"
            policy = ReadPolicy(show_only_markdown=False, hide_assets_folder=True, flatten_draft_folders=False)
            with mock.patch("mdtree.config.CONFIG_PATH", config_path):
                config.save_directory_policy(policy)
                self.assertEqual(config.load_directory_policy(), policy)
                self.assertTrue(config_path.exists())

    def test_non_boolean_policy_values_fall_back_to_true(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "mdtree.json"
            with mock.patch("mdtree.config.CONFIG_PATH", config_path):
                config.save_config({"show_only_markdown": "no", "hide_assets_folder": 0, "flatten_draft_folders": False})
                self.assertEqual(
                    config.load_directory_policy(),
                    ReadPolicy(show_only_markdown=True, hide_assets_folder=True, flatten_draft_folders=False),
                )

    def test_malformed_config_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "mdtree.json"
            config_path.write_text("[not, json", encoding="utf-8")
            with mock.patch("mdtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_style(), "monokai")
                self.assertIsNone(config.load_theme_name())
                self.assertEqual(config.load_workspace_roots(), [])

    def test_style_and_workspace_roots_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "mdtree.json"
            with mock.patch("mdtree.config.CONFIG_PATH", config_path):
                config.save_style("  friendly ")
                config.save_style("   ")
                config.save_workspace_roots(["/a", "/b"])
                self.assertEqual(config.load_style(), "friendly")
                self.assertEqual(config.load_workspace_roots(), ["/a", "/b"])

    def test_workspace_roots_drop_invalid_items(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "mdtree.json"
            with mock.patch("mdtree.config.CONFIG_PATH", config_path):
                config.save_config({"workspace_roots": ["/ok", 3, "", None]})
                self.assertEqual(config.load_workspace_roots(), ["/ok"])


if __name__ == "__main__":
    unittest.main()
