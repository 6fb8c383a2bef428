"""Tests for Markdown summary rendering."""

from contest_validator.report import DatasetReport, emit
from contest_validator.summary import render_summary
from contest_validator.validators import CheckResult


def _report(*results):
    return DatasetReport(results=tuple(results))


def test_summary_for_passing_run():
    text = render_summary(_report(CheckResult("handles", "Handle"), CheckResult("teams", "Teams")))
    assert "Result: **passed** | Failed checks: 0 | Diagnostics: 0" in text
    assert "| Handle | pass | 0 |" in text
    assert "## " not in text


def test_summary_lists_failing_diagnostics():
    report = _report(
        CheckResult("handles", "Handle"),
        CheckResult("findings", "Findings", ("Found 1 unknown handles: carol",)),
    )
    text = render_summary(report)
    assert "| Findings | fail | 1 |" in text
    assert "## Findings" in text
    assert "- Found 1 unknown handles: carol" in text


def test_emit_routes_diagnostics_to_err(capsys):
    report = _report(
        CheckResult("handles", "Handle"),
        CheckResult("contests", "Contest", ("duplicate",)),
    )
    emit(report)
    captured = capsys.readouterr()
    assert captured.out == "✅  Handle validation passed!\n"
    assert captured.err.splitlines() == [
        "duplicate",
        "❌  Contest validation failed. See above log for more information.",
    ]
