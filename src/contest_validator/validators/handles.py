"""Handle rule: required key, avatar path anchoring and uniqueness."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from ..models import HandleRecord, ParseError
from .paths import image_diagnostic
from .result import CheckResult


def check_handles(
    handles: Sequence[HandleRecord],
    handles_dir: Path,
    avatar_prefix: str,
    parse_errors: Iterable[ParseError] = (),
) -> CheckResult:
    diagnostics: list[str] = []
    seen: dict[str, Path] = {}

    for record in handles:
        if not record.has_handle:
            diagnostics.append(f'Unable to find key "handle" in {record.path}')
        elif record.handle in seen:
            diagnostics.append(
                f'Duplicate handle "{record.handle}" in {record.path} '
                f"(first registered in {seen[record.handle]})"
            )
        else:
            seen[record.handle] = record.path

        if record.image:
            if not record.image.startswith(avatar_prefix):
                diagnostics.append(
                    f'"image" property must begin with "{avatar_prefix}" in {record.path}. '
                    f"Found {record.image}."
                )
            problem = image_diagnostic(handles_dir, record.image, record.path)
            if problem:
                diagnostics.append(problem)

    return CheckResult.build("handles", "Handle", diagnostics, parse_errors)
