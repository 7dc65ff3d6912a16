"""Report model combining detection and enumeration results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..tech import MONOREPO_TECHS
from .workspace_package import WorkspacePackage

REPORT_VERSION = "1"


@dataclass(frozen=True)
class MonorepoReport:
    """Immutable view of one inspection of a repository root."""

    root: str
    tech: str | None
    looks_like: bool
    packages: tuple[WorkspacePackage, ...] = ()

    def __post_init__(self) -> None:
        if not self.root:
            raise ValueError("root must be provided")
        if self.tech is not None and self.tech not in MONOREPO_TECHS:
            raise ValueError(f"Invalid monorepo tech: {self.tech}")

    @property
    def is_monorepo(self) -> bool:
        return self.tech is not None

    @property
    def totals(self) -> dict[str, int]:
        return {"packages": len(self.packages)}

    def packages_by_name(self) -> dict[str, str]:
        return {package.name: package.path for package in self.packages}

    def to_dict(self) -> dict[str, object]:
        return {
            "version": REPORT_VERSION,
            "root": self.root,
            "isMonorepo": self.is_monorepo,
            "tech": self.tech,
            "looksLikeMonorepo": self.looks_like,
            "packages": [package.to_dict() for package in self.packages],
            "totals": self.totals,
        }

    @classmethod
    def from_mapping(
        cls,
        *,
        root: str,
        tech: str | None,
        looks_like: bool,
        mapping: Mapping[str, str],
    ) -> MonorepoReport:
        packages = tuple(WorkspacePackage(name=name, path=path) for name, path in mapping.items())
        return cls(root=root, tech=tech, looks_like=looks_like, packages=packages)
