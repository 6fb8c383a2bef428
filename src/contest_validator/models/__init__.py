"""Typed records for the contest dataset."""

from __future__ import annotations

from .records import (
    ContestRecord,
    FindingRecord,
    HandleRecord,
    OrganizationRecord,
)
from .parse_result import ParseError, partition

__all__ = [
    "ContestRecord",
    "FindingRecord",
    "HandleRecord",
    "OrganizationRecord",
    "ParseError",
    "partition",
]
