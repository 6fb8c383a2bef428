"""Team rule: every member must be a registered handle."""

from __future__ import annotations

from collections.abc import Sequence

from ..index import DatasetIndex
from ..models import HandleRecord
from .result import CheckResult


def check_teams(handles: Sequence[HandleRecord], index: DatasetIndex) -> CheckResult:
    # Parse failures were already reported by the handle rule.
    diagnostics = [
        f"Team specified in {record.path} has unregistered handle: {member}"
        for record in handles
        if record.is_team
        for member in record.members
        if member not in index.unique_handles
    ]
    return CheckResult.build("teams", "Teams", diagnostics)
