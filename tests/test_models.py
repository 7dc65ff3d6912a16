"""Tests for monorepo_inspector.models."""

from __future__ import annotations

import pytest

from monorepo_inspector.models import MonorepoReport, WorkspacePackage


class TestWorkspacePackage:
    def test_to_dict(self) -> None:
        package = WorkspacePackage(name="ui", path="./packages/ui")
        assert package.to_dict() == {"name": "ui", "path": "./packages/ui"}

    @pytest.mark.parametrize(
        ("name", "path"),
        [
            ("", "./packages/ui"),
            ("ui", "packages/ui"),
            ("ui", "./packages\\ui"),
        ],
    )
    def test_rejects_invalid(self, name: str, path: str) -> None:
        with pytest.raises(ValueError):
            WorkspacePackage(name=name, path=path)


class TestMonorepoReport:
    def test_from_mapping_preserves_order(self) -> None:
        report = MonorepoReport.from_mapping(
            root="/repo",
            tech="pnpm",
            looks_like=True,
            mapping={"b": "./packages/b", "a": "./apps/a"},
        )
        assert [p.name for p in report.packages] == ["b", "a"]
        assert report.packages_by_name() == {"b": "./packages/b", "a": "./apps/a"}
        assert report.is_monorepo is True

    def test_to_dict(self) -> None:
        report = MonorepoReport(
            root="/repo",
            tech=None,
            looks_like=True,
            packages=(WorkspacePackage(name="a", path="./apps/a"),),
        )
        assert report.to_dict() == {
            "version": "1",
            "root": "/repo",
            "isMonorepo": False,
            "tech": None,
            "looksLikeMonorepo": True,
            "packages": [{"name": "a", "path": "./apps/a"}],
            "totals": {"packages": 1},
        }

    def test_rejects_unknown_tech(self) -> None:
        with pytest.raises(ValueError, match="Invalid monorepo tech"):
            MonorepoReport(root="/repo", tech="bazel", looks_like=False)

    def test_rejects_empty_root(self) -> None:
        with pytest.raises(ValueError):
            MonorepoReport(root="", tech=None, looks_like=False)
