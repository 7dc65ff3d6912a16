"""Human-readable Markdown rendering of an inspection report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with the detected tech and a table of packages."""
    totals = report.get("totals", {})
    packages = report.get("packages", [])

    if report.get("isMonorepo"):
        verdict = f"Monorepo ({report.get('tech')})"
    elif report.get("looksLikeMonorepo"):
        verdict = "Looks like a monorepo (no tooling configuration found)"
    else:
        verdict = "Not a monorepo"

    lines = []
    lines.append("# Monorepo Summary")
    lines.append("")
    lines.append(f"Root: `{report.get('root', '')}`")
    lines.append("")
    lines.append(f"{verdict} | Packages: {totals.get('packages', 0)}")
    lines.append("")
    lines.append("| Package | Path |")
    lines.append("| --- | --- |")

    for package in packages:
        lines.append(f"| {package.get('name', '')} | {package.get('path', '')} |")

    if not packages:
        lines.append("| (no packages found) | n/a |")

    return "\n".join(lines) + "\n"
