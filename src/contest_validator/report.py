"""Run report aggregation, console output and the run-level failure state."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from .validators import CheckResult


class ValidationFailure(RuntimeError):
    """Raised once all rules have run and at least one of them failed."""

    def __init__(self, failed: Sequence[CheckResult]):
        self.failed = tuple(failed)
        names = ", ".join(result.label for result in self.failed)
        super().__init__(f"Validation failed: {names}")


@dataclass(slots=True, frozen=True)
class DatasetReport:
    """Results of every rule, in the order they ran."""

    results: tuple[CheckResult, ...]

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def failed_checks(self) -> tuple[CheckResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    @property
    def diagnostic_count(self) -> int:
        return sum(len(result.diagnostics) for result in self.results)

    def get(self, name: str) -> CheckResult:
        for result in self.results:
            if result.name == name:
                return result
        raise KeyError(name)

    def to_dict(self) -> dict[str, Any]:
        """Schema-friendly representation for --json output."""
        return {
            "version": "1",
            "passed": self.passed,
            "checks": [result.to_dict() for result in self.results],
            "totals": {
                "checks": len(self.results),
                "failed": len(self.failed_checks),
                "diagnostics": self.diagnostic_count,
            },
        }


def emit(report: DatasetReport, out: TextIO | None = None, err: TextIO | None = None) -> None:
    """Print each rule's diagnostics followed by its pass/fail line."""
    out = out or sys.stdout
    err = err or sys.stderr

    for result in report.results:
        for line in result.diagnostics:
            print(line, file=err)
        if result.passed:
            print(f"✅  {result.label} validation passed!", file=out)
        else:
            print(
                f"❌  {result.label} validation failed. See above log for more information.",
                file=err,
            )

    if report.passed:
        print("Validation passed!", file=out)


def raise_for_failures(report: DatasetReport) -> None:
    """Raise ValidationFailure if any rule reported a diagnostic."""
    failed = report.failed_checks
    if failed:
        raise ValidationFailure(failed)
