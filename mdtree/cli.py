"""Command-line front door for mdtree.

Parses CLI options, resolves workspace roots, and prints the markdown tree.
``--open`` runs the tree's open-file action instead; ``--watch`` keeps
re-rendering when displayed directories change.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from . import config
from .errors import NotFoundError, TreeError
from .file_tree_model import LocalStatProvider, ReadPolicy
from .highlight import render_open_file
from .tree_pane import (
    LOCAL_SCHEME,
    TreeDataSource,
    WorkspaceRoot,
    collect_tree_rows,
    format_tree_row,
    parse_workspace_root,
    workspace_root_display_labels,
)
from .ui_theme import UITheme, available_theme_names, resolve_theme
from .vfs import LocalFileSystem
from .watch import build_tree_watch_signature, watched_directories

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def build_workspace_roots(raw_roots: Sequence[str]) -> list[WorkspaceRoot]:
    """Parse roots, naming local roots with disambiguated labels on name clashes."""
    roots = [parse_workspace_root(raw) for raw in raw_roots]
    local_indexes = [idx for idx, root in enumerate(roots) if root.scheme == "file"]
    names = [roots[idx].name for idx in local_indexes]
    if len(set(names)) == len(names):
        return roots
    labels = workspace_root_display_labels([roots[idx].path for idx in local_indexes])
    for idx, label in zip(local_indexes, labels):
        roots[idx] = WorkspaceRoot(name=label, path=roots[idx].path, scheme=roots[idx].scheme)
    return roots


def _failure_message(exc: Exception) -> str:
    """One-line message for a failed read; typed errors also log their fields."""
    if isinstance(exc, TreeError):
        logger.debug("tree read failed: %s", exc.to_dict())
    return f"mdtree: {exc}"


def save_preferences(raw_paths: Sequence[str], style: str | None, policy: ReadPolicy) -> None:
    """Persist the roots, style and directory policy of this run as defaults.

    Local roots are stored as absolute paths; ``scheme://`` roots verbatim.
    An empty ``raw_paths`` or ``style`` leaves the stored value untouched.
    """
    if raw_paths:
        stored = []
        for raw in raw_paths:
            root = parse_workspace_root(raw)
            stored.append(str(root.path) if root.scheme == LOCAL_SCHEME else str(raw))
        config.save_workspace_roots(stored)
    if style:
        config.save_style(style)
    config.save_directory_policy(policy)
    logger.debug("saved preferences to %s", config.CONFIG_PATH)


async def render_tree(data_source: TreeDataSource, max_depth: int, theme: UITheme) -> tuple[str, set[Path]]:
    """Return rendered tree text plus the directories it was read from."""
    rows = await collect_tree_rows(data_source, max_depth)
    text = "".join(format_tree_row(row, theme) + "\n" for row in rows)
    roots = [root.path for root in data_source.root_resolver.local_roots()]
    return text, watched_directories(rows, roots)


def watch_loop(data_source: TreeDataSource, max_depth: int, theme: UITheme, interval: float) -> None:
    """Re-render whenever the watched directories' signature changes.

    A failing refresh reports the error and leaves the last output in place.
    """
    signature: str | None = None
    watched: set[Path] = {root.path for root in data_source.root_resolver.local_roots()}
    while True:
        current = build_tree_watch_signature(watched)
        if current != signature:
            try:
                text, watched = asyncio.run(render_tree(data_source, max_depth, theme))
            except (TreeError, OSError) as exc:
                sys.stderr.write(f"{theme.error}{_failure_message(exc)}{theme.reset}\n")
            else:
                sys.stdout.write("\033[H\033[2J" + text)
                sys.stdout.flush()
            signature = build_tree_watch_signature(watched)
        time.sleep(interval)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the tree for the selected workspace roots.

    Roots come from positional paths, then the ``workspace_roots`` config key,
    then ``default_path`` (the current directory when omitted).
    """
    parser = argparse.ArgumentParser(
        description="Print a markdown-focused tree with draft folders flattened and assets attached."
    )
    parser.add_argument("paths", nargs="*", help="Workspace root paths. Defaults to the current directory.")
    parser.add_argument("--depth", type=_positive_int, default=3, help="Levels to expand (default: 3).")
    parser.add_argument("--all", action="store_true", help="Show every entry; disable filtering and flattening.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--open", metavar="FILE", help="Print FILE with syntax highlighting and exit.")
    parser.add_argument("--style", default=None, help="Pygments style name used by --open.")
    parser.add_argument("--watch", action="store_true", help="Keep re-rendering when files change.")
    parser.add_argument("--interval", type=_positive_float, default=1.0, help="Watch poll interval in seconds.")
    parser.add_argument(
        "--save",
        action="store_true",
        help="Store the given paths, --style and filtering mode as defaults for later runs.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log directory reads to stderr.")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.open is not None:
        open_path = Path(args.open)
        try:
            data = asyncio.run(LocalFileSystem().read_file(open_path))
        except NotFoundError as exc:
            raise SystemExit(f"File not found: {open_path}") from exc
        except OSError as exc:
            raise SystemExit(f"mdtree: {exc}") from exc
        style = args.style or config.load_style()
        if args.save and args.style:
            config.save_style(args.style)
        sys.stdout.write(render_open_file(data, open_path, style=style, no_color=args.no_color))
        return

    raw_roots = list(args.paths) or config.load_workspace_roots()
    if not raw_roots:
        raw_roots = [str(default_path or Path.cwd())]
    roots = build_workspace_roots(raw_roots)
    for root in roots:
        if root.scheme == "file" and not root.path.is_dir():
            raise SystemExit(f"Directory not found: {root.path}")

    policy = ReadPolicy() if args.all else config.load_directory_policy()
    if args.save:
        save_preferences(args.paths, args.style, policy)
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    data_source = TreeDataSource.create(LocalStatProvider(), lambda: roots, directory_policy=policy)

    if args.watch:
        try:
            watch_loop(data_source, args.depth, theme, args.interval)
        except KeyboardInterrupt:
            return
        return

    try:
        text, _watched = asyncio.run(render_tree(data_source, args.depth, theme))
    except (TreeError, OSError) as exc:
        raise SystemExit(_failure_message(exc)) from exc
    sys.stdout.write(text)


if __name__ == "__main__":
    main()
