"""Command-line entrypoint for validating a contest dataset."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, load_settings
from .core import validate_dataset
from .discovery import CollectionError
from .report import ValidationFailure, emit, raise_for_failures
from .summary import render_summary

EXIT_OK = 0
EXIT_VALIDATION_FAILED = 1
EXIT_FATAL = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Dataset root containing handles/, orgs/, contests/ and findings/",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML settings file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON instead of diagnostic lines",
    )
    parser.add_argument(
        "--warn-only",
        action="store_true",
        help="Report failures but exit 0",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _write_step_summary(markdown: str) -> None:
    summary_path = os.getenv("GITHUB_STEP_SUMMARY")
    if not summary_path:
        return
    try:
        with open(summary_path, "a", encoding="utf-8") as fh:
            fh.write(markdown)
    except OSError as exc:
        # The validation outcome still decides the exit code.
        print(f"ERROR: Failed to write step summary: {exc}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.config, data_root=args.root)
        if args.warn_only:
            settings = replace(settings, warn_only=True)
        report = validate_dataset(settings)
    except (ConfigError, CollectionError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_FATAL

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        emit(report)
    _write_step_summary(render_summary(report))

    try:
        raise_for_failures(report)
    except ValidationFailure as exc:
        print(f"❌  {exc}", file=sys.stderr)
        if settings.warn_only:
            return EXIT_OK
        return EXIT_VALIDATION_FAILED

    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
