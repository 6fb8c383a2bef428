"""Parse organization files (one JSON object per file)."""

from __future__ import annotations

from pathlib import Path

from ..models import OrganizationRecord, ParseError
from ..schemas import ORGANIZATION_VALIDATOR
from .json_file import load_document


def parse(path: Path) -> OrganizationRecord | ParseError:
    document = load_document(path, ORGANIZATION_VALIDATOR)
    if isinstance(document, ParseError):
        return document
    return OrganizationRecord.from_dict(path, document)
