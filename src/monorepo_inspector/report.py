"""Compose detection and enumeration into a single schema-friendly report."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from .core import get_monorepo_packages, is_monorepo, is_monorepo_like
from .models import MonorepoReport


def inspect_repository(root: str | PathLike[str] | None = None) -> MonorepoReport:
    """Run all three checks against ``root``.

    Packages are only enumerated when the root is a monorepo or looks like
    one; otherwise the report carries an empty package list.
    """
    root_path = Path(root) if root else Path.cwd()
    tech = is_monorepo(root_path)
    looks_like = is_monorepo_like(root_path)

    packages: dict[str, str] = {}
    if tech or looks_like:
        packages = get_monorepo_packages(root_path)

    return MonorepoReport.from_mapping(
        root=str(root_path.resolve()),
        tech=tech or None,
        looks_like=looks_like,
        mapping=packages,
    )
