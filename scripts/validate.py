#!/usr/bin/env python3
"""Local entrypoint to validate the dataset before publishing.

Usage:
  python scripts/validate.py --root _data [--config contest-validator.yaml] [--json] [--warn-only]

This calls the same cli.main used by the ``contest-validator`` console script.
"""

from __future__ import annotations

from contest_validator.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
