"""CLI entrypoint for inspecting a directory as a monorepo root.

Usage:
  monorepo-inspector --root . [--format json|markdown] [--require-monorepo] [--validate]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .report import inspect_repository
from .summary import render_summary
from .validators import ReportValidationError, validate_report

logger = logging.getLogger("monorepo_inspector")

EXIT_NOT_MONOREPO = 2


def _configure_logging(level: int) -> None:
    logger.setLevel(level)
    # Reset handlers so repeated invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[monorepo-inspector] %(levelname)s %(message)s"))
    logger.addHandler(handler)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Detect a monorepo and list its packages.")
    parser.add_argument("--root", type=Path, default=Path("."), help="Directory to inspect")
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Output format written to stdout",
    )
    parser.add_argument(
        "--require-monorepo",
        action="store_true",
        help=f"Exit with status {EXIT_NOT_MONOREPO} when the root is not a monorepo",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the report against the bundled JSON Schema before printing",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    _configure_logging(logging.DEBUG if args.verbose else settings.log_level)

    report = inspect_repository(args.root)
    data = report.to_dict()

    if args.validate:
        try:
            validate_report(data, settings.schema_path)
        except FileNotFoundError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1
        except json.JSONDecodeError as exc:
            print(f"ERROR: Failed to read schema: {exc}", file=sys.stderr)
            return 1
        except ReportValidationError as exc:
            print(f"ERROR: Report failed validation:{exc}", file=sys.stderr)
            return 1

    if args.format == "markdown":
        sys.stdout.write(render_summary(data))
    else:
        print(json.dumps(data, indent=2))

    if not report.is_monorepo:
        logger.info("%s is not a monorepo", data["root"])
        if args.require_monorepo or settings.require_monorepo:
            return EXIT_NOT_MONOREPO
    else:
        logger.info("Found %s monorepo with %d package(s)", report.tech, len(report.packages))

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
