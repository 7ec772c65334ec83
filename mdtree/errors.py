"""Tree-construction error hierarchy.

Every error carries typed fields (not just a message string) and supports
``to_dict()`` for notifications. Storage errors subclass the matching builtin
so callers may catch either ``NotFoundError`` or ``FileNotFoundError``.
"""

from __future__ import annotations

from pathlib import Path


class TreeError(Exception):
    """Base error for all tree-listing failures."""

    def __init__(self, message: str, *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}

    def to_dict(self) -> dict:
        return {"error": type(self).__name__, "message": self.message, **self.detail}

    def __str__(self) -> str:
        return self.message


class NotFoundError(TreeError, FileNotFoundError):
    """Path vanished (or never existed) when the storage layer was asked."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"No such file or directory: '{path}'", detail={"path": str(path)})


class NotDirectoryError(TreeError, NotADirectoryError):
    """A directory listing was requested for a non-directory."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Not a directory: '{path}'", detail={"path": str(path)})


class CyclicStructureError(TreeError):
    """Draft flattening re-entered a directory already being expanded."""

    def __init__(self, path: Path | str, chain: list[Path] | None = None) -> None:
        self.path = Path(path)
        self.chain = list(chain or [])
        super().__init__(
            f"Cyclic directory structure at '{path}'",
            detail={"path": str(path), "chain": [str(item) for item in self.chain]},
        )


__all__ = [
    "TreeError",
    "NotFoundError",
    "NotDirectoryError",
    "CyclicStructureError",
]
