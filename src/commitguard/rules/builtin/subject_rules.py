"""Rules over the commit subject."""

from commitguard.message.models import CommitMessage
from commitguard.rules.case import matches_any_case
from commitguard.rules.models import (
    RuleDefinition,
    RuleResult,
    check_cases,
    check_char,
    normalise_cases,
)


def subject_empty(message: CommitMessage, options=None) -> RuleResult:
    return RuleResult(
        passed=not message.subject,
        message="subject must be empty",
        negated_message="subject may not be empty",
    )


def subject_case(message: CommitMessage, options=None) -> RuleResult:
    if not message.subject:
        return RuleResult.skip()
    cases = normalise_cases(options, default=["lower-case"])
    described = " or ".join(cases)
    return RuleResult(
        passed=matches_any_case(message.subject, cases),
        message=f"subject must be {described}",
        negated_message=f"subject must not be {described}",
    )


def subject_full_stop(message: CommitMessage, options=None) -> RuleResult:
    if not message.subject:
        return RuleResult.skip()
    stop = options if options is not None else "."
    return RuleResult(
        passed=message.subject.endswith(stop),
        message=f"subject must end with '{stop}'",
        negated_message=f"subject may not end with '{stop}'",
    )


SUBJECT_EMPTY = RuleDefinition(
    name="subject-empty",
    fn=subject_empty,
    description="Subject is empty.",
)

SUBJECT_CASE = RuleDefinition(
    name="subject-case",
    fn=subject_case,
    description="Subject follows one of the listed case conventions.",
    check_options=check_cases,
)

SUBJECT_FULL_STOP = RuleDefinition(
    name="subject-full-stop",
    fn=subject_full_stop,
    description="Subject ends with the given character.",
    check_options=check_char,
)

ALL_SUBJECT_RULES = [SUBJECT_EMPTY, SUBJECT_CASE, SUBJECT_FULL_STOP]
