"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from commitguard.results.models import Report

REPORT_VERSION = "1.0"


def to_dict(report: Report) -> Dict[str, Any]:
    """Convert a Report to a JSON-serialisable dict."""
    results: List[Dict[str, Any]] = []
    for o in report.outcomes:
        results.append({
            "rule": o.rule_name,
            "severity": o.severity,
            "passed": o.passed,
            **({"message": o.message} if o.message else {}),
        })

    return {
        "version": REPORT_VERSION,
        "input": report.input,
        "status": report.status,
        "valid": report.valid,
        "errors": len(report.errors),
        "warnings": len(report.warnings),
        "results": results,
    }


def render(report: Report) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(report), indent=2, ensure_ascii=False)
