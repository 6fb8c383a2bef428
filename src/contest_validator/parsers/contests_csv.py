"""Parse the contests table (CSV with a header row)."""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Iterator
from pathlib import Path

from ..models import ContestRecord, ParseError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"contestid", "sponsor"}

CONTEST_ID_PATTERN = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


def parse_contest_id(raw: str) -> int | float:
    """Parse a contestid cell as a plain decimal number, preferring int.

    Raises ValueError for blank or non-numeric values, including forms Python
    would otherwise accept such as ``1_0``, ``1e3`` or ``nan``.
    """
    cleaned = raw.strip()
    if not CONTEST_ID_PATTERN.fullmatch(cleaned):
        raise ValueError(f"not a decimal number: {raw!r}")
    if "." not in cleaned:
        return int(cleaned)
    value = float(cleaned)
    return int(value) if value.is_integer() else value


def _iter_rows(path: Path) -> Iterator[tuple[int, dict[str, str]]]:
    with path.open(encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        if reader.fieldnames is None:
            raise ValueError("contests table is missing its header row")
        missing = REQUIRED_COLUMNS - set(reader.fieldnames)
        if missing:
            raise ValueError(f"contests table missing required columns: {', '.join(sorted(missing))}")
        # Row numbers count the header as row 1.
        for index, row in enumerate(reader, start=2):
            yield index, row


def parse(path: Path) -> list[ContestRecord | ParseError]:
    """Return one result per data row, or a single error for the whole table."""
    results: list[ContestRecord | ParseError] = []
    try:
        for index, row in _iter_rows(path):
            location = f"row {index}"
            try:
                contestid = parse_contest_id(row.get("contestid") or "")
            except ValueError:
                results.append(
                    ParseError(path, f"contestid is not numeric: {row.get('contestid')!r}", location)
                )
                continue
            sponsor = (row.get("sponsor") or "").strip()
            fields = {
                key: value
                for key, value in row.items()
                if key is not None and key not in REQUIRED_COLUMNS
            }
            results.append(
                ContestRecord(path=path, row=index, contestid=contestid, sponsor=sponsor, fields=fields)
            )
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        logger.debug("Skipping unreadable contests table %s: %s", path, exc)
        return [ParseError(path, f"unable to read contests table ({exc})")]
    except ValueError as exc:
        return [ParseError(path, str(exc))]

    return results
