"""Readers for the configuration files a JavaScript monorepo declares."""

from .package_json import MANIFEST_NAME, load_manifest, package_name, workspace_patterns
from .pnpm_workspace import WORKSPACE_FILE, load_workspace_patterns

__all__ = [
    "MANIFEST_NAME",
    "WORKSPACE_FILE",
    "load_manifest",
    "load_workspace_patterns",
    "package_name",
    "workspace_patterns",
]
