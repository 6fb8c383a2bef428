"""Cross-reference rules, one module per entity category.

Each check is a pure function of parsed records and indexes returning a
CheckResult. Checks never stop one another; the core runs them in order.
"""

from __future__ import annotations

from .result import CheckResult
from .handles import check_handles
from .teams import check_teams
from .organizations import check_organizations
from .contests import check_contests
from .findings import check_findings

__all__ = [
    "CheckResult",
    "check_contests",
    "check_findings",
    "check_handles",
    "check_organizations",
    "check_teams",
]
