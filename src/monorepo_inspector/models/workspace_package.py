"""Workspace package model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WorkspacePackage:
    """A member package discovered under a workspace pattern."""

    name: str
    path: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")
        if not self.path.startswith("./"):
            raise ValueError(f"Package path must be relative to the root: {self.path}")
        if "\\" in self.path:
            raise ValueError(f"Package path must use forward slashes: {self.path}")

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "path": self.path,
        }
