"""Organization rule: a logo must be declared and exist on disk."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from ..models import OrganizationRecord, ParseError
from .paths import image_diagnostic
from .result import CheckResult


def check_organizations(
    orgs: Sequence[OrganizationRecord],
    orgs_dir: Path,
    parse_errors: Iterable[ParseError] = (),
) -> CheckResult:
    diagnostics: list[str] = []

    for record in orgs:
        if not record.has_image:
            diagnostics.append(f'Unable to find key "image" in {record.path}')
            continue
        if not record.image:
            diagnostics.append(f'Empty "image" key in {record.path}')
            continue
        problem = image_diagnostic(orgs_dir, record.image, record.path)
        if problem:
            diagnostics.append(problem)

    return CheckResult.build("organizations", "Organization", diagnostics, parse_errors)
