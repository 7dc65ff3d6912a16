"""Tests for report composition, summary rendering and schema validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from monorepo_inspector.report import inspect_repository
from monorepo_inspector.summary import render_summary
from monorepo_inspector.validators import ReportValidationError, validate_report


class TestInspectRepository:
    def test_pnpm_monorepo(self, write_tree) -> None:
        root = write_tree(
            {
                "pnpm-workspace.yaml": "packages:\n  - packages/*\n",
                "packages/core/package.json": {"name": "core"},
            }
        )
        report = inspect_repository(root)
        assert report.tech == "pnpm"
        assert report.looks_like is True
        assert report.packages_by_name() == {"core": "./packages/core"}
        assert report.root == str(root.resolve())

    def test_looks_like_only(self, write_tree) -> None:
        root = write_tree({"apps/site/package.json": {"name": "site"}})
        report = inspect_repository(root)
        assert report.is_monorepo is False
        assert report.looks_like is True
        assert report.packages_by_name() == {"site": "./apps/site"}

    def test_plain_repository(self, write_tree) -> None:
        root = write_tree({"package.json": {"name": "single"}})
        report = inspect_repository(root)
        assert report.tech is None
        assert report.looks_like is False
        assert report.packages == ()

    def test_report_matches_schema(self, write_tree) -> None:
        root = write_tree(
            {
                "package.json": {"workspaces": ["packages/*"]},
                "packages/a/package.json": {"name": "a"},
            }
        )
        validate_report(inspect_repository(root).to_dict())


class TestValidateReport:
    def test_reports_all_errors(self) -> None:
        bad = {
            "version": "1",
            "root": "/repo",
            "isMonorepo": True,
            "tech": "bazel",
            "looksLikeMonorepo": False,
            "packages": [{"name": "a", "path": "apps/a"}],
            "totals": {"packages": 1},
        }
        with pytest.raises(ReportValidationError) as excinfo:
            validate_report(bad)
        message = str(excinfo.value)
        assert "- tech:" in message
        assert "- packages/0/path:" in message

    def test_custom_schema_path(self, tmp_path: Path) -> None:
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps({"type": "object", "required": ["x"]}), encoding="utf-8")
        with pytest.raises(ReportValidationError, match="<root>"):
            validate_report({}, schema)


class TestRenderSummary:
    def test_monorepo_table(self) -> None:
        text = render_summary(
            {
                "root": "/repo",
                "isMonorepo": True,
                "tech": "yarn",
                "packages": [{"name": "ui", "path": "./packages/ui"}],
                "totals": {"packages": 1},
            }
        )
        assert "Monorepo (yarn) | Packages: 1" in text
        assert "| ui | ./packages/ui |" in text
        assert text.endswith("\n")

    def test_not_a_monorepo(self) -> None:
        text = render_summary({"root": "/repo", "packages": [], "totals": {"packages": 0}})
        assert "Not a monorepo" in text
        assert "| (no packages found) | n/a |" in text

    def test_looks_like(self) -> None:
        text = render_summary({"root": "/repo", "looksLikeMonorepo": True})
        assert "Looks like a monorepo" in text
