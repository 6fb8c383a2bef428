"""Shared JSON decoding for the per-file parsers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from ..models import ParseError
from ..schemas import schema_errors

logger = logging.getLogger(__name__)


def load_document(path: Path, validator: Draft202012Validator | None = None) -> Any:
    """Decode a JSON file, returning the document or a ParseError.

    When ``validator`` is given the document must also match its schema.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Skipping unreadable file %s: %s", path, exc)
        return ParseError(path, f"unable to read file ({exc})")

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Skipping invalid JSON in %s: %s", path, exc)
        return ParseError(path, f"invalid JSON ({exc})")

    if validator is not None:
        problems = schema_errors(validator, document)
        if problems:
            logger.debug("Skipping %s: %s", path, problems)
            return ParseError(path, f"unexpected record shape ({problems})")

    return document
