"""Domain model for markdown document trees.

This package contains non-UI tree primitives:
- entry/stat datatypes and listing policies
- the async storage collaborator interface plus a local implementation
- assets-sidecar detection
- the policy-driven directory builder
"""

from __future__ import annotations

from .assets import AssetResolver, assets_candidate_for
from .build import TreeBuilder, canonical_path, is_hidden_by_policy
from .stat_provider import LocalStatProvider, StatProvider, file_stat_from_os, file_type_for_mode
from .types import (
    ASSETS_SUFFIX,
    DRAFT_FOLDER_NAME,
    MARKDOWN_EXTENSION,
    Entry,
    FileStat,
    FileType,
    ReadPolicy,
)

__all__ = [
    "ASSETS_SUFFIX",
    "DRAFT_FOLDER_NAME",
    "MARKDOWN_EXTENSION",
    "Entry",
    "FileStat",
    "FileType",
    "ReadPolicy",
    "StatProvider",
    "LocalStatProvider",
    "file_stat_from_os",
    "file_type_for_mode",
    "AssetResolver",
    "assets_candidate_for",
    "TreeBuilder",
    "canonical_path",
    "is_hidden_by_policy",
]
