"""Monorepo detection and package enumeration entrypoints.

Each function takes an optional directory (default: the current working
directory), only reads from the filesystem and keeps no state between calls.
"""

from __future__ import annotations

import logging
import os
from os import PathLike
from pathlib import Path
from typing import Literal

from .discovery import FALLBACK_FOLDERS, discover_packages, resolve_workspace_patterns
from .parsers.package_json import load_manifest, workspace_patterns
from .tech import MONOREPO_LOOKUP, WORKSPACES_TECH, MonorepoTech

logger = logging.getLogger(__name__)


def _resolve_dir(path: str | PathLike[str] | None) -> Path:
    return Path(path) if path else Path(os.getcwd())


def is_monorepo(path: str | PathLike[str] | None = None) -> MonorepoTech | Literal[False]:
    """Return the monorepo tech used at ``path``, or ``False``.

    Marker files take precedence over a ``workspaces`` field in package.json,
    which is reported as ``"yarn"``.
    """
    root = _resolve_dir(path)

    for marker, tech in MONOREPO_LOOKUP:
        if (root / marker).exists():
            logger.debug("Found %s in %s", marker, root)
            return tech

    if workspace_patterns(load_manifest(root)):
        logger.debug("Found package.json workspaces in %s", root)
        return WORKSPACES_TECH

    return False


def is_monorepo_like(path: str | PathLike[str] | None = None) -> bool:
    """Return True if ``path`` has a ``packages`` or ``apps`` directory.

    No monorepo configuration is required.
    """
    root = _resolve_dir(path)
    return any((root / folder).is_dir() for folder in FALLBACK_FOLDERS)


def get_monorepo_packages(path: str | PathLike[str] | None = None) -> dict[str, str]:
    """Return the monorepo's packages as ``{name: "./relative/path"}``.

    Workspace globs come from package.json, then pnpm-workspace.yaml, then the
    ``packages``/``apps`` folders. Unreadable manifests are skipped, so the
    mapping may be empty.
    """
    root = _resolve_dir(path)
    patterns = resolve_workspace_patterns(root)
    logger.debug("Workspace patterns for %s: %s", root, patterns)
    return discover_packages(root, patterns)
