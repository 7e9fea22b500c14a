"""Rules over the commit type."""

from commitguard.message.models import CommitMessage
from commitguard.rules.case import matches_any_case
from commitguard.rules.models import (
    RuleDefinition,
    RuleResult,
    check_cases,
    check_string_list,
    normalise_cases,
)


def type_empty(message: CommitMessage, options=None) -> RuleResult:
    return RuleResult(
        passed=not message.type,
        message="type must be empty",
        negated_message="type may not be empty",
    )


def type_enum(message: CommitMessage, options=None) -> RuleResult:
    if not message.type or options is None:
        return RuleResult.skip()
    allowed = ", ".join(options)
    return RuleResult(
        passed=message.type in options,
        message=f"type '{message.type}' must be one of [{allowed}]",
        negated_message=f"type '{message.type}' must not be one of [{allowed}]",
    )


def type_case(message: CommitMessage, options=None) -> RuleResult:
    if not message.type:
        return RuleResult.skip()
    cases = normalise_cases(options, default=["lower-case"])
    described = " or ".join(cases)
    return RuleResult(
        passed=matches_any_case(message.type, cases),
        message=f"type must be {described}",
        negated_message=f"type must not be {described}",
    )


TYPE_EMPTY = RuleDefinition(
    name="type-empty",
    fn=type_empty,
    description="Type is empty.",
)

TYPE_ENUM = RuleDefinition(
    name="type-enum",
    fn=type_enum,
    description="Type is one of the listed values.",
    check_options=check_string_list,
)

TYPE_CASE = RuleDefinition(
    name="type-case",
    fn=type_case,
    description="Type follows one of the listed case conventions.",
    check_options=check_cases,
)

ALL_TYPE_RULES = [TYPE_EMPTY, TYPE_ENUM, TYPE_CASE]
