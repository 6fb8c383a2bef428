"""Validation pipeline entrypoint.

collect -> parse -> partition -> index -> rules. Each stage receives its
inputs explicitly; nothing is shared between runs.
"""

from __future__ import annotations

import logging

from .config import Settings
from .discovery import collect
from .index import build_indexes
from .models import partition
from .parsers import contests_csv, findings as findings_parser, handles as handles_parser
from .parsers import orgs as orgs_parser
from .report import DatasetReport
from .validators import (
    check_contests,
    check_findings,
    check_handles,
    check_organizations,
    check_teams,
)

logger = logging.getLogger(__name__)


def validate_dataset(settings: Settings) -> DatasetReport:
    """Validate every cross-reference in the dataset under settings.data_root.

    Raises:
        CollectionError: If an expected directory or file is missing. No rule
            runs in that case.

    Parse failures and rule violations never raise; they are returned as
    diagnostics in the report.
    """
    files = collect(settings)

    handles, handle_errors = partition(handles_parser.parse(p) for p in files.handles)
    orgs, org_errors = partition(orgs_parser.parse(p) for p in files.orgs)
    contests, contest_errors = partition(contests_csv.parse(files.contests))
    findings, finding_errors = partition(findings_parser.parse(files.findings))
    logger.debug(
        "Parsed %d handle(s), %d organization(s), %d contest(s), %d finding(s)",
        len(handles),
        len(orgs),
        len(contests),
        len(findings),
    )

    index = build_indexes(handles, orgs, contests)

    # Order matters for readers of the output: teams, contests and findings
    # reference categories validated before them.
    results = (
        check_handles(handles, settings.handles_path, settings.avatar_prefix, handle_errors),
        check_teams(handles, index),
        check_organizations(orgs, settings.orgs_path, org_errors),
        check_contests(contests, index, contest_errors),
        check_findings(findings, index, finding_errors),
    )
    return DatasetReport(results=results)
