"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from .report import DatasetReport


def render_summary(report: DatasetReport) -> str:
    """Return a Markdown string with a status table and the failing diagnostics."""
    lines = []
    lines.append("# Dataset validation summary")
    lines.append("")
    status = "passed" if report.passed else "failed"
    lines.append(
        f"Result: **{status}** | Failed checks: {len(report.failed_checks)} "
        f"| Diagnostics: {report.diagnostic_count}"
    )
    lines.append("")
    lines.append("| Check | Status | Diagnostics |")
    lines.append("| --- | --- | --- |")

    for result in report.results:
        mark = "pass" if result.passed else "fail"
        lines.append(f"| {result.label} | {mark} | {len(result.diagnostics)} |")

    for result in report.failed_checks:
        lines.append("")
        lines.append(f"## {result.label}")
        lines.append("")
        for diagnostic in result.diagnostics:
            lines.append(f"- {diagnostic}")

    return "\n".join(lines) + "\n"
