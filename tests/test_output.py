"""Tests for output reporters."""

import io
import json

from rich.console import Console

from commitguard.output import json_report, terminal
from commitguard.results.aggregator import aggregate
from commitguard.results.models import Report, RuleOutcome


def _make_report(outcomes=None) -> Report:
    """Build a Report with sample data."""
    if outcomes is None:
        outcomes = [
            RuleOutcome(rule_name="type-empty", severity="error", passed=True),
            RuleOutcome(
                rule_name="subject-full-stop",
                severity="error",
                passed=False,
                message="subject may not end with '.'",
            ),
            RuleOutcome(
                rule_name="body-leading-blank",
                severity="warning",
                passed=False,
                message="body must have leading blank line",
            ),
        ]
    return aggregate(outcomes, input="fix(api): tidy up.")


def _capture(report: Report, **kwargs) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    terminal.render(report, console=console, **kwargs)
    return buffer.getvalue()


class TestJsonReport:
    def test_valid_json(self):
        data = json.loads(json_report.render(_make_report()))
        assert data["version"] == "1.0"
        assert data["status"] == "fail"
        assert data["valid"] is False
        assert data["errors"] == 1
        assert data["warnings"] == 1
        assert data["input"] == "fix(api): tidy up."

    def test_results_in_order(self):
        data = json_report.to_dict(_make_report())
        assert [r["rule"] for r in data["results"]] == [
            "type-empty",
            "subject-full-stop",
            "body-leading-blank",
        ]
        assert "message" not in data["results"][0]
        assert data["results"][1]["message"] == "subject may not end with '.'"

    def test_clean_report(self):
        data = json_report.to_dict(_make_report([]))
        assert data["status"] == "pass"
        assert data["results"] == []


class TestTerminal:
    def test_lists_failures(self):
        out = _capture(_make_report())
        assert "subject-full-stop" in out
        assert "body-leading-blank" in out
        assert "REJECTED" in out
        assert "type-empty" not in out

    def test_warn_verdict(self):
        report = _make_report([
            RuleOutcome(rule_name="body-leading-blank", severity="warning", passed=False, message="w"),
        ])
        assert "Commit allowed" in _capture(report)

    def test_clean(self):
        out = _capture(_make_report([]))
        assert "clean" in out

    def test_input_with_brackets_printed_verbatim(self):
        report = aggregate([], input="fix: [WIP] tidy")
        assert "[WIP]" in _capture(report)

    def test_summary_toggle(self):
        assert "Rules run" in _capture(_make_report(), show_summary=True)
        assert "Rules run" not in _capture(_make_report(), show_summary=False)
