"""Workspace pattern resolution and package discovery."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .models import WorkspacePackage
from .parsers.package_json import MANIFEST_NAME, load_manifest, package_name, workspace_patterns
from .parsers.pnpm_workspace import load_workspace_patterns

logger = logging.getLogger(__name__)

FALLBACK_FOLDERS = ("packages", "apps")

# Only trailing-wildcard globs ("packages/*") are understood; anything from the
# first "*" onwards is dropped.
_WILDCARD = re.compile(r"\*.*$")


def resolve_workspace_patterns(root: Path) -> list[str]:
    """Return the workspace globs for ``root``.

    Sources are tried in order, stopping at the first that yields a pattern:
    the manifest ``workspaces`` field, ``pnpm-workspace.yaml``, then the
    conventional ``packages``/``apps`` folders.
    """
    patterns = workspace_patterns(load_manifest(root))
    if patterns:
        return patterns

    patterns = load_workspace_patterns(root)
    if patterns:
        return patterns

    return [f"{folder}/*" for folder in FALLBACK_FOLDERS if (root / folder).is_dir()]


def pattern_base(pattern: str) -> str:
    """Return the directory part of ``pattern``, always relative to the root."""
    return _WILDCARD.sub("", pattern).lstrip("/\\")


def relative_package_path(base: str, entry: str) -> str:
    """Build the ``./``-prefixed, forward-slash path of ``entry`` under ``base``."""
    base = base.replace("\\", "/").strip("/")
    while base.startswith("./"):
        base = base[2:].lstrip("/")
    if base == ".":
        base = ""
    rel = f"{base}/{entry}" if base else entry
    return "./" + rel.replace("\\", "/")


def expand_pattern(root: Path, pattern: str) -> Iterator[WorkspacePackage]:
    """Yield the packages directly below the base directory of ``pattern``."""
    base = pattern_base(pattern)
    abs_base = root / base
    if not abs_base.is_dir():
        logger.debug("Skipping pattern %r: %s is not a directory", pattern, abs_base)
        return

    for child in sorted(abs_base.iterdir(), key=lambda p: p.name):
        if not (child / MANIFEST_NAME).is_file():
            continue
        name = package_name(load_manifest(child))
        if name is None:
            logger.debug("Skipping %s: manifest has no usable name", child)
            continue
        yield WorkspacePackage(name=name, path=relative_package_path(base, child.name))


def discover_packages(root: Path, patterns: Iterable[str]) -> dict[str, str]:
    """Map package name -> relative path for every pattern, last write wins."""
    result: dict[str, str] = {}
    for pattern in patterns:
        for package in expand_pattern(root, pattern):
            if package.name in result:
                logger.debug(
                    "Package %s at %s replaces %s", package.name, package.path, result[package.name]
                )
            result[package.name] = package.path
    return result
