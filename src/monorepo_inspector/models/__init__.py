"""Data models for monorepo inspection results."""

from __future__ import annotations

from .monorepo_report import REPORT_VERSION, MonorepoReport
from .workspace_package import WorkspacePackage

__all__ = [
    "REPORT_VERSION",
    "MonorepoReport",
    "WorkspacePackage",
]
