"""Parse the findings file: a JSON array of ``{handle, contest}`` objects."""

from __future__ import annotations

from pathlib import Path

from ..models import FindingRecord, ParseError
from ..schemas import FINDING_VALIDATOR, schema_errors
from .json_file import load_document


def parse(path: Path) -> list[FindingRecord | ParseError]:
    """Return one result per entry.

    A malformed entry only drops that entry; a document that is not an array
    yields a single ParseError for the whole file.
    """
    document = load_document(path)
    if isinstance(document, ParseError):
        return [document]
    if not isinstance(document, list):
        return [ParseError(path, "findings must be a JSON array")]

    results: list[FindingRecord | ParseError] = []
    for index, entry in enumerate(document):
        problems = schema_errors(FINDING_VALIDATOR, entry)
        if problems:
            results.append(ParseError(path, problems, location=f"entry {index}"))
            continue
        results.append(
            FindingRecord(path=path, index=index, handle=entry["handle"], contest=entry["contest"])
        )
    return results
