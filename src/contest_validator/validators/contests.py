"""Contest rule: known sponsor and unique contestid per row."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..index import DatasetIndex
from ..models import ContestRecord, ParseError
from .result import CheckResult


def check_contests(
    contests: Sequence[ContestRecord],
    index: DatasetIndex,
    parse_errors: Iterable[ParseError] = (),
) -> CheckResult:
    """Check each row for an unknown sponsor and a repeated contestid.

    The first occurrence of an id registers it, whether or not its sponsor is
    known; every later occurrence is reported.
    """
    diagnostics: list[str] = []
    existing_ids: set[int | float] = set()

    for contest in contests:
        if contest.sponsor not in index.registered_organizations:
            diagnostics.append(
                f"Contest at {contest.location} uses unknown organization: {contest.sponsor}"
            )

        if contest.contestid in existing_ids:
            diagnostics.append(
                f"Contest at {contest.location} uses duplicate contestid: {contest.contestid}"
            )
        else:
            existing_ids.add(contest.contestid)

    return CheckResult.build("contests", "Contest", diagnostics, parse_errors)
