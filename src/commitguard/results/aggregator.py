"""Outcome aggregation — overall status and the human readable summary."""

from __future__ import annotations

from typing import Iterable, List

from commitguard.results.models import Report, RuleOutcome, Status

ERROR_SIGN = "✖"
WARNING_SIGN = "⚠"
PASS_SIGN = "✔"


def overall_status(outcomes: Iterable[RuleOutcome]) -> Status:
    """``fail`` on any failed error, else ``warn`` on any failed warning."""
    status: Status = "pass"
    for outcome in outcomes:
        if outcome.is_error:
            return "fail"
        if outcome.is_warning:
            status = "warn"
    return status


def _line(sign: str, outcome: RuleOutcome) -> str:
    return f"{sign}   {outcome.message} [{outcome.rule_name}]"


def format_summary(outcomes: List[RuleOutcome]) -> str:
    """One line per failed outcome, errors first, evaluation order kept."""
    errors = [o for o in outcomes if o.is_error]
    warnings = [o for o in outcomes if o.is_warning]
    if not errors and not warnings:
        return f"{PASS_SIGN}   no problems found"

    lines = [_line(ERROR_SIGN, o) for o in errors]
    lines += [_line(WARNING_SIGN, o) for o in warnings]
    sign = ERROR_SIGN if errors else WARNING_SIGN
    lines.append(f"{sign}   found {len(errors)} problems, {len(warnings)} warnings")
    return "\n".join(lines)


def aggregate(outcomes: Iterable[RuleOutcome], *, input: str = "") -> Report:
    """Combine rule outcomes into a :class:`Report`. Pure."""
    ordered = list(outcomes)
    return Report(
        outcomes=tuple(ordered),
        status=overall_status(ordered),
        summary=format_summary(ordered),
        input=input,
    )
