"""Outcome of a single rule."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..models import ParseError


@dataclass(slots=True, frozen=True)
class CheckResult:
    """Ordered diagnostics of one rule. Any diagnostic fails the rule."""

    name: str
    label: str
    diagnostics: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.diagnostics

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "passed": self.passed,
            "diagnostics": list(self.diagnostics),
        }

    @classmethod
    def build(
        cls,
        name: str,
        label: str,
        diagnostics: Iterable[str],
        parse_errors: Iterable[ParseError] = (),
    ) -> CheckResult:
        """Parse diagnostics come first, followed by the rule's own."""
        lines = [error.describe() for error in parse_errors]
        lines.extend(diagnostics)
        return cls(name=name, label=label, diagnostics=tuple(lines))
