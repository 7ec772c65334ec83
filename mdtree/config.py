"""Persistent JSON config helpers.

Stores the directory-expansion policy, the Pygments style used when opening
files, the tree theme, and default workspace roots. All access is defensive:
malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .file_tree_model import ReadPolicy

APP_NAME = "mdtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_STYLE = "monokai"

_POLICY_KEYS = ("show_only_markdown", "hide_assets_folder", "flatten_draft_folders")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep the CLI non-fatal
    when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_directory_policy() -> ReadPolicy:
    """Return the policy applied when a directory node is expanded.

    Each switch defaults to ``True``; only explicit booleans override it.
    """
    data = load_config()
    values = {}
    for key in _POLICY_KEYS:
        value = data.get(key)
        values[key] = value if isinstance(value, bool) else True
    return ReadPolicy(**values)


def save_directory_policy(policy: ReadPolicy) -> None:
    config = load_config()
    for key in _POLICY_KEYS:
        config[key] = bool(getattr(policy, key))
    save_config(config)


def load_style() -> str:
    """Load persisted Pygments style name, falling back to ``monokai``."""
    value = load_config().get("style")
    if not isinstance(value, str):
        return DEFAULT_STYLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_STYLE


def save_style(style: str) -> None:
    stripped = str(style).strip()
    if not stripped:
        return
    config = load_config()
    config["style"] = stripped
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_workspace_roots() -> list[str]:
    """Load default workspace roots; non-string and empty items are dropped."""
    value = load_config().get("workspace_roots")
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]


def save_workspace_roots(roots: list[str]) -> None:
    config = load_config()
    config["workspace_roots"] = [str(root) for root in roots]
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_STYLE",
    "load_config",
    "save_config",
    "load_directory_policy",
    "save_directory_policy",
    "load_style",
    "save_style",
    "load_theme_name",
    "load_workspace_roots",
    "save_workspace_roots",
]
