"""Parse pnpm-workspace.yaml to capture declared package globs."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

WORKSPACE_FILE = "pnpm-workspace.yaml"


def parse(path: Path) -> list[str]:
    """Return the ``packages`` globs from a pnpm workspace file.

    A missing file, malformed YAML or an unexpected document shape contributes
    no patterns.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except UnicodeDecodeError as exc:
        logger.debug("Skipping %s: not valid UTF-8 (%s)", path, exc.reason)
        return []

    try:
        data = yaml.safe_load(text) or {}
    except (yaml.YAMLError, ValueError) as exc:
        # ValueError comes from constructors, e.g. an impossible timestamp
        logger.debug("Skipping %s: invalid YAML (%s)", path, exc)
        return []

    if not isinstance(data, dict):
        return []
    packages = data.get("packages")
    if not isinstance(packages, list):
        return []
    return [pattern for pattern in packages if isinstance(pattern, str)]


def load_workspace_patterns(directory: str | PathLike[str]) -> list[str]:
    return parse(Path(directory) / WORKSPACE_FILE)
