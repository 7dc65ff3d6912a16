"""Monorepo tooling identifiers and the marker files that imply them."""

from __future__ import annotations

from typing import Literal

MonorepoTech = Literal["pnpm", "lerna", "turbo", "nx", "rush", "yarn"]

# Checked in order; the first marker present decides the tech.
MONOREPO_LOOKUP: tuple[tuple[str, MonorepoTech], ...] = (
    ("pnpm-workspace.yaml", "pnpm"),
    ("lerna.json", "lerna"),
    ("turbo.json", "turbo"),
    ("nx.json", "nx"),
    ("rush.json", "rush"),
)

WORKSPACES_TECH: MonorepoTech = "yarn"

MONOREPO_TECHS: frozenset[str] = frozenset(
    [tech for _, tech in MONOREPO_LOOKUP] + [WORKSPACES_TECH]
)
