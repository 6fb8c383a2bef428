"""Per-file parse outcomes and the helper that splits them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from .records import ContestRecord, FindingRecord, HandleRecord, OrganizationRecord


@dataclass(slots=True, frozen=True)
class ParseError:
    """Diagnostic for content that could not be decoded into a record.

    This is a value, not an exception: the offending file (or row) is left out
    of every index and rule while the rest of the run continues.
    """

    path: Path
    message: str
    location: str | None = None

    def describe(self) -> str:
        where = f"{self.path}:{self.location}" if self.location else str(self.path)
        return f"Unable to parse {where}: {self.message}"


RecordT = TypeVar("RecordT", HandleRecord, OrganizationRecord, ContestRecord, FindingRecord)


def partition(results: Iterable[RecordT | ParseError]) -> tuple[list[RecordT], list[ParseError]]:
    """Split parse results into (records, errors), preserving order."""
    records: list[RecordT] = []
    errors: list[ParseError] = []
    for result in results:
        if isinstance(result, ParseError):
            errors.append(result)
        else:
            records.append(result)
    return records, errors
