"""Parse handle and team files (one JSON object per file)."""

from __future__ import annotations

from pathlib import Path

from ..models import HandleRecord, ParseError
from ..schemas import HANDLE_VALIDATOR
from .json_file import load_document


def parse(path: Path) -> HandleRecord | ParseError:
    document = load_document(path, HANDLE_VALIDATOR)
    if isinstance(document, ParseError):
        return document
    return HandleRecord.from_dict(path, document)
