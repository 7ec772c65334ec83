"""Public package surface for mdtree.

Exports ``main`` for programmatic CLI invocation.
Tree-building lives in ``mdtree.file_tree_model`` and ``mdtree.tree_pane``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
