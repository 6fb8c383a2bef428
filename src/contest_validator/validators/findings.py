"""Findings rule: every finding points at a known handle and contest.

Unknown values are summarised per category instead of one line per finding,
since the findings file is large.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..index import DatasetIndex
from ..models import FindingRecord, ParseError
from .result import CheckResult


def _summary(values: set, noun: str) -> str:
    listed = ", ".join(str(v) for v in sorted(values))
    return f"Found {len(values)} unknown {noun}: {listed}"


def unknown_references(
    findings: Iterable[FindingRecord], index: DatasetIndex
) -> tuple[set[str], set[int | float]]:
    """Return (unknown handles, unknown contest ids) referenced by findings.

    Both references are checked, so one finding can land in both sets.
    """
    unknown_handles: set[str] = set()
    unknown_contest_ids: set[int | float] = set()
    for finding in findings:
        if finding.handle not in index.unique_handles:
            unknown_handles.add(finding.handle)
        if finding.contest not in index.unique_contest_ids:
            unknown_contest_ids.add(finding.contest)
    return unknown_handles, unknown_contest_ids


def check_findings(
    findings: Sequence[FindingRecord],
    index: DatasetIndex,
    parse_errors: Iterable[ParseError] = (),
) -> CheckResult:
    unknown_handles, unknown_contest_ids = unknown_references(findings, index)

    diagnostics: list[str] = []
    if unknown_handles:
        diagnostics.append(_summary(unknown_handles, "handles"))
    if unknown_contest_ids:
        diagnostics.append(_summary(unknown_contest_ids, "contestids"))

    return CheckResult.build("findings", "Findings", diagnostics, parse_errors)
