"""Rule engine — runs a resolved configuration against a parsed message.

Exception safety: an exception raised by one rule is turned into a failing
error outcome for that rule; the remaining rules still run.
"""

from __future__ import annotations

import logging
from typing import List

from commitguard.config.schema import ResolvedConfig, RuleSpec
from commitguard.message.models import CommitMessage
from commitguard.message.parser import parse
from commitguard.results.aggregator import aggregate
from commitguard.results.models import Report, RuleOutcome
from commitguard.rules.models import RuleResult

logger = logging.getLogger(__name__)


class RuleExecutionError(Exception):
    """A rule implementation failed while checking a message."""

    def __init__(self, rule_name: str, cause: BaseException) -> None:
        self.rule_name = rule_name
        self.cause = cause
        super().__init__(
            f"rule {rule_name} failed to run: {type(cause).__name__}: {cause}"
        )


def _run_rule(spec: RuleSpec, message: CommitMessage) -> RuleResult:
    if spec.impl is None:
        raise RuleExecutionError(spec.name, LookupError("no implementation bound"))
    try:
        return RuleResult.coerce(spec.impl(message, spec.options))
    except Exception as exc:
        raise RuleExecutionError(spec.name, exc) from exc


def _outcome(spec: RuleSpec, result: RuleResult) -> RuleOutcome:
    if not result.applies:
        return RuleOutcome(rule_name=spec.name, severity=spec.severity, passed=True)

    if spec.applicability == "never":
        passed = not result.passed
        message = result.negated_message or (
            f"{result.message} (must not hold)" if result.message else ""
        )
    else:
        passed = result.passed
        message = result.message

    if passed:
        message = ""
    elif not message:
        message = f"{spec.name} failed"
    return RuleOutcome(
        rule_name=spec.name,
        severity=spec.severity,
        passed=passed,
        message=message,
    )


def evaluate(message: CommitMessage, config: ResolvedConfig) -> Report:
    """Run every enabled rule of *config* against *message*, in config order."""
    outcomes: List[RuleOutcome] = []

    for spec in config.enabled_rules:
        try:
            result = _run_rule(spec, message)
        except RuleExecutionError as exc:
            logger.warning("%s", exc)
            outcomes.append(
                RuleOutcome(
                    rule_name=spec.name,
                    severity="error",
                    passed=False,
                    message=str(exc),
                )
            )
            continue
        outcomes.append(_outcome(spec, result))

    report = aggregate(outcomes, input=message.header)
    logger.debug(
        "Evaluated %d rule(s): %s (%d errors, %d warnings)",
        len(outcomes),
        report.status,
        len(report.errors),
        len(report.warnings),
    )
    return report


def lint(raw: str, config: ResolvedConfig) -> Report:
    """Parse *raw* and evaluate it against *config*."""
    return evaluate(parse(raw), config)
