"""Parse package.json manifests and extract workspace declarations."""

from __future__ import annotations

import json
import logging
from os import PathLike
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


def parse(path: Path) -> dict[str, Any]:
    """Return the manifest at ``path`` as a mapping.

    Missing files, invalid JSON, undecodable bytes and non-object documents all
    yield an empty mapping. Other OS errors (e.g. permission denied) propagate.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except UnicodeDecodeError as exc:
        logger.debug("Skipping %s: not valid UTF-8 (%s)", path, exc.reason)
        return {}

    try:
        data = json.loads(text)
    except ValueError as exc:
        # JSONDecodeError, or the int-string digit limit on oversized numbers
        logger.debug("Skipping %s: invalid JSON (%s)", path, exc)
        return {}

    if not isinstance(data, dict):
        logger.debug("Skipping %s: top-level value is not an object", path)
        return {}
    return data


def load_manifest(directory: str | PathLike[str]) -> dict[str, Any]:
    """Locate and parse the package.json directly inside ``directory``."""
    return parse(Path(directory) / MANIFEST_NAME)


def workspace_patterns(manifest: dict[str, Any]) -> list[str]:
    """Return the workspace globs declared by a manifest.

    Both forms are accepted:
    - ``"workspaces": ["packages/*"]``
    - ``"workspaces": {"packages": ["packages/*"], "nohoist": [...]}``
    """
    workspaces = manifest.get("workspaces")
    if isinstance(workspaces, dict):
        workspaces = workspaces.get("packages")
    if not isinstance(workspaces, list):
        return []
    return [pattern for pattern in workspaces if isinstance(pattern, str)]


def package_name(manifest: dict[str, Any]) -> str | None:
    name = manifest.get("name")
    if isinstance(name, str) and name:
        return name
    return None
